from .describe_service import DescribeService, StandardDescribeService
from .output_formatter import ColoredFormatter, OutputFormatter

__all__ = [
    "DescribeService",
    "StandardDescribeService",
    "ColoredFormatter",
    "OutputFormatter",
]
