import sys

from repostructure.main import main

sys.exit(main())
