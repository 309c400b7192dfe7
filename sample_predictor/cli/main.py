"""
Main CLI entry point for sample_predictor.

Predicts spectral x,y data files with a calibration model loaded by an
external prediction engine and prints the results as tab separated text.
Without data files a preview of all results the model produces is printed.
"""

import argparse
import io
import sys

from sample_predictor.config import RunConfig
from sample_predictor.core.logging import LogContext, configure_logging, get_logger
from sample_predictor.data.loaders import DELIMITER_LOADERS, load_data
from sample_predictor.predictor import create_predictor
from sample_predictor.report import get_prediction_report, results_to_string

logger = get_logger(__name__)


def get_version():
    """Get the current version of sample_predictor."""
    try:
        from importlib.metadata import PackageNotFoundError, version
        return version("sample-predictor")
    except PackageNotFoundError:
        from .. import __version__
        return __version__


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        prog='sample-predictor',
        description='Predict spectral x,y data with a calibration model loaded by an external prediction engine.'
    )

    parser.add_argument(
        'files',
        nargs='*',
        metavar='FILE',
        help='Space separated file paths (*.txt) containing comma separated x,y data to predict'
    )
    parser.add_argument(
        '-m', '--model',
        default=None,
        help='File path of the calibration model (*.calibration)'
    )
    parser.add_argument(
        '-f', '--factory',
        required=True,
        help='Prediction engine implementing the PredictorFactory interface '
             '(python file or module, optionally followed by :ClassName)'
    )
    parser.add_argument(
        '-d', '--delimiter',
        choices=sorted(DELIMITER_LOADERS),
        default=None,
        help='Column delimiter of the data files (default: chosen by file extension)'
    )

    parser.add_argument('-v', '--verbose', action='count', default=0, help='Increase log verbosity (-v info, -vv debug)')
    parser.add_argument('-q', '--quiet', action='store_true', help='Disable all log output')
    parser.add_argument('--log-file', action='store_true', help='Also write a log file for this run')
    parser.add_argument('--log-dir', default=None, help='Directory for log files (default: ./logs)')

    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {get_version()}'
    )
    return parser


def run(config: RunConfig) -> int:
    """Execute one client run.

    Returns:
        Process exit code: 0 on success, 1 if the run was aborted.
    """
    mode = "preview" if config.preview_mode else "predict"
    with LogContext(run_name=mode, model=config.model_path):
        try:
            configure_logging(
                verbose=config.verbose,
                log_file=config.log_file,
                log_dir=config.log_dir,
            )
            predictor = create_predictor(config.factory_path, config.model_path)

            if config.preview_mode:
                # all results the calibration model can return, values not computed
                preview = predictor.get_result_preview()
                print(results_to_string(preview, config.model_path))
                return 0

            data = load_data(config.data_files, config.delimiter)
            print(get_prediction_report(predictor, data))
        except Exception as e:
            logger.debug("Run aborted", exc_info=True)
            print(e)
            return 1

    logger.success(f"Predicted {len(config.data_files)} file(s) with {config.model_path}")
    return 0


def main():
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args()

    # reports carry their own CRLF terminators
    if isinstance(sys.stdout, io.TextIOWrapper):
        sys.stdout.reconfigure(newline="")

    exit_code = run(RunConfig.from_namespace(args))
    if exit_code:
        sys.exit(exit_code)


if __name__ == '__main__':
    main()
