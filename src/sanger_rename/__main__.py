from sanger_rename.ui_terminal.main import main

raise SystemExit(main())
