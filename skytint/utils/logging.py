"""
Logging utilities for SkyTint
Provides console logging setup and batch progress tracking
"""

import logging
import sys
from typing import Optional, Dict, Any
from datetime import datetime

logger = logging.getLogger(__name__)

DEFAULT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class ProcessingStats:
    """Tracks batch processing statistics"""

    def __init__(self):
        """Initialize processing statistics"""
        self.start_time = datetime.now()
        self.total_files = 0
        self.processed_files = 0
        self.succeeded_files = 0
        self.failed_files = 0
        self.errors = []
        self.processing_times = []

    def set_total(self, total: int):
        """Set total number of files to process"""
        self.total_files = total

    def add_result(self, succeeded: bool, processing_time: Optional[float] = None):
        """
        Add a processing result

        Args:
            succeeded: Whether the file was written
            processing_time: Time taken to process file
        """
        self.processed_files += 1

        if succeeded:
            self.succeeded_files += 1
        else:
            self.failed_files += 1

        if processing_time:
            self.processing_times.append(processing_time)

    def add_error(self, file_path: str, error: str):
        """Add an error"""
        self.errors.append({
            'file': file_path,
            'error': error,
            'time': datetime.now()
        })

    def get_elapsed_time(self) -> float:
        """Get elapsed time in seconds"""
        return (datetime.now() - self.start_time).total_seconds()

    def get_average_processing_time(self) -> float:
        """Get average processing time per file"""
        if not self.processing_times:
            return 0.0
        return sum(self.processing_times) / len(self.processing_times)

    def get_summary(self) -> Dict[str, Any]:
        """Get processing summary"""
        elapsed = self.get_elapsed_time()

        return {
            'total_files': self.total_files,
            'processed_files': self.processed_files,
            'succeeded_files': self.succeeded_files,
            'failed_files': self.failed_files,
            'errors': len(self.errors),
            'elapsed_time': elapsed,
            'average_time_per_file': self.get_average_processing_time(),
        }

    def print_summary(self):
        """Print processing summary to console"""
        summary = self.get_summary()

        print("\n" + "=" * 60)
        print("PROCESSING SUMMARY")
        print("=" * 60)
        print(f"Total files:      {summary['total_files']}")
        print(f"Processed:        {summary['processed_files']}")
        print(f"Written:          {summary['succeeded_files']}")
        print(f"Failed:           {summary['failed_files']}")
        print(f"Elapsed time:     {summary['elapsed_time']:.1f}s")
        print(f"Avg time/file:    {summary['average_time_per_file']:.2f}s")
        print("=" * 60)

        if self.errors:
            print("\nERRORS:")
            for error in self.errors[:10]:  # Show first 10 errors
                print(f"  - {error['file']}: {error['error']}")
            if len(self.errors) > 10:
                print(f"  ... and {len(self.errors) - 10} more errors")


def setup_console_logging(level: str = "INFO", color: bool = True,
                          fmt: str = DEFAULT_FORMAT):
    """
    Setup console logging with optional color support

    Args:
        level: Logging level
        color: Whether to use colored output
        fmt: Log record format for the plain formatter
    """
    # Create console handler
    console_handler = logging.StreamHandler(sys.stdout)

    # Create formatter
    if color and sys.stdout.isatty():
        # Use colored formatter if supported
        try:
            import colorlog
            formatter = colorlog.ColoredFormatter(
                '%(log_color)s%(asctime)s - %(name)s - %(levelname)s%(reset)s - %(message)s',
                log_colors={
                    'DEBUG': 'cyan',
                    'INFO': 'green',
                    'WARNING': 'yellow',
                    'ERROR': 'red',
                    'CRITICAL': 'red,bg_white',
                }
            )
        except ImportError:
            # Fallback to standard formatter
            formatter = logging.Formatter(fmt)
    else:
        formatter = logging.Formatter(fmt)

    console_handler.setFormatter(formatter)

    # Configure root logger
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    root_logger.addHandler(console_handler)
