import sys

from suitemap.cli._dispatcher import main

sys.exit(main())
