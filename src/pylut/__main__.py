"""``python -m pylut``."""

from .main import main

raise SystemExit(main())
