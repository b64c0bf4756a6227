# lear/__main__.py

from lear.main import main

main()
