import sys

from hadith_overlay.main import main

sys.exit(main())
