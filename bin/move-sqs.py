import sys

from sqsmove.cli import main

sys.exit(main())
