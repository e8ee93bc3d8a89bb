"""Log-scale sample: the stock two-series frequency-response chart.

Writes ``logscale-sample.svg`` to the current directory and prints the path.
"""

import sys

from freqplot import main

if __name__ == "__main__":
    sys.exit(main())
