import sys

from sixth.interp import main

sys.exit(main())
