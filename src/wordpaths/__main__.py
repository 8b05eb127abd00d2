"""Allow running the solver with ``python -m wordpaths``."""

from wordpaths import main

main()
