import sys

from gita_cli.main import main

sys.exit(main())
