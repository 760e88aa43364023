import sys

from src.demo.strassen_demo import main

sys.exit(main())
