import sys

from azure_vision_app.cli import main

sys.exit(main())
