"""Recompute the hiring rate of one or more companies right now.

Usage:
  python scripts/recompute_hiring_rate.py <company_id> [<company_id> ...]

The rate is normally refreshed when an application is marked hired; use this
to correct a company whose stored rate went stale.
"""

import sys
import os

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from jobsadmin import create_app
from jobsadmin.extensions import backend
from jobsadmin.jobs.hiring_rate import HiringRateRecalculator


def main(argv):
    if not argv:
        print(__doc__)
        return 2
    app = create_app()
    failed = 0
    with app.app_context():
        recalculator = HiringRateRecalculator(backend.client)
        for company_id in argv:
            try:
                rate = recalculator.recalculate_company(company_id)
            except Exception:
                app.logger.exception('recompute failed for company %s', company_id)
                failed += 1
                continue
            if rate is None:
                print(f'{company_id}: skipped (no jobs)')
            else:
                print(f'{company_id}: {rate}%')
    return 1 if failed else 0


if __name__ == '__main__':
    sys.exit(main(sys.argv[1:]))
