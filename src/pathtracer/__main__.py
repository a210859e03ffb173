# __main__.py
import sys

from pathtracer.main import main

sys.exit(main())
