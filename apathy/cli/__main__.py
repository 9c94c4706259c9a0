import sys

from apathy.cli.main import main

sys.exit(main())
