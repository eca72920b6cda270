from gsheetingest.cli import main

raise SystemExit(main())
