"""Run the lrvalues command-line interface with `python -m lrvalues`."""

from lrvalues.cli import main

main()
