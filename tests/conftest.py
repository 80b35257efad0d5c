import os

# Tests create real Qt widgets; never require a display server
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
