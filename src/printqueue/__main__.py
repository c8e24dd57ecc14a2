"""Allow ``python -m printqueue``."""

from printqueue.presentation.cli import main

raise SystemExit(main())
