from revved_finder.cli import main

raise SystemExit(main())
