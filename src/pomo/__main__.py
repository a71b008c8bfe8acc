import sys

from pomo.main import main

sys.exit(main())
