from __future__ import annotations

import sys

from faultcatalog.main import main

sys.exit(main())
