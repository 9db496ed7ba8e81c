import argparse
import logging

from textual.logging import TextualHandler

from .UI import UI
from .config import TimerConfig
from .intake_dummy import IntakeDummy

def main() -> None:
    parser = argparse.ArgumentParser(
        prog='salary-timer',
        description='Watch your net pay accrue second by second.',
    )
    parser.add_argument('payslip', nargs='?', help='payslip PDF to load at start')
    parser.add_argument('--browse', default='.', help='directory shown in the file picker')
    parser.add_argument('--dotenv', default=None, help='.env file with SALARY_TIMER_* settings')
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG, handlers=[TextualHandler()])

    config = TimerConfig.fromEnv(args.dotenv)
    intake = IntakeDummy(
        gross_monthly=config.placeholder_gross,
        net_monthly=config.placeholder_net,
        working_hours=config.placeholder_hours,
    )
    UI(
        intake, config=config,
        browse_dir=args.browse, initial_path=args.payslip,
    ).run()

if __name__ == '__main__':
    main()
