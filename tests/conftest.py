import os

# Widgets and timers are created without a display in CI.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
