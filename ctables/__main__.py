import sys
from ctables.main import main

sys.exit(main())
