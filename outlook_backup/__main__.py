from outlook_backup.cli import main


raise SystemExit(main())
