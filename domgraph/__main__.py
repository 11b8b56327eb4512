from domgraph.interfaces.cli.main import main

raise SystemExit(main())
