import sys

from lev.main import main

sys.exit(main())
