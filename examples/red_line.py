"""
The Red Line problem from Think Bayes, chapter 8.

Red Line trains in Boston run every 7-8 minutes at rush hour. Given the
observed gaps between trains, how long does a passenger arriving at a random
time expect to wait? Passengers are more likely to arrive during a long gap,
so the gap they see is biased towards long ones.
"""
import logging

import numpy as np

from thinkbayes import Pmf
from thinkbayes.distributions import estimate_pdf

OBSERVED_GAP_TIMES = [x / 60.0 for x in [
    428.0, 705.0, 407.0, 465.0, 433.0, 425.0, 204.0, 506.0, 143.0, 351.0,
    450.0, 598.0, 464.0, 749.0, 341.0, 586.0, 754.0, 256.0, 378.0, 435.0,
    176.0, 405.0, 360.0, 519.0, 648.0, 374.0, 483.0, 537.0, 578.0, 534.0,
    577.0, 619.0, 538.0, 331.0, 186.0, 629.0, 193.0, 360.0, 660.0, 484.0,
    512.0, 315.0, 457.0, 404.0, 740.0, 388.0, 357.0, 485.0, 567.0, 160.0,
    428.0, 387.0, 901.0, 187.0, 622.0, 616.0, 585.0, 474.0, 442.0, 499.0,
    437.0, 620.0, 351.0, 286.0, 373.0, 232.0, 393.0, 745.0, 636.0, 758.0]]

SECOND = 1.0 / 60.0


def frange(start, stop, step):
    """Evenly spaced values from start to stop, both included."""
    return np.arange(start, stop + step / 2, step).tolist()


def bias_pmf(pmf):
    """Gap distribution as seen by a passenger arriving at random."""
    return pmf.map_items(lambda k, prob: (k, prob * k)).normalize()


def wait_time_pmf(biased):
    """Mixes a uniform wait over [0, gap] for every gap."""
    return biased.map_keys(lambda k: Pmf.from_values(frange(0.0, k, 10 * SECOND))).mixture()


class WaitTimeCalculator(object):

    def __init__(self, gap_pmf):
        self.gap_pmf = gap_pmf
        self.biased_gap_pmf = bias_pmf(gap_pmf)
        self.wait_pmf = wait_time_pmf(self.biased_gap_pmf)


def main():
    logging.basicConfig(level=logging.INFO)
    log = logging.getLogger('red_line')

    gap_pmf = estimate_pdf(OBSERVED_GAP_TIMES).make_pmf(frange(0.0, 20.0, SECOND),
                                                        name='gap').normalize()
    calc = WaitTimeCalculator(gap_pmf)

    for label, pmf in [('actual gap', calc.gap_pmf),
                       ('biased gap', calc.biased_gap_pmf),
                       ('wait time', calc.wait_pmf)]:
        low, high = pmf.credible_interval(0.9)
        log.info('%-10s mean %.2f min, 90%% CI (%.2f, %.2f)', label, pmf.mean(), low, high)


if __name__ == '__main__':
    main()
