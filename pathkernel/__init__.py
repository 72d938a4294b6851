"""
pathkernel - 2D geometry and affine transform kernel for path rendering
"""
import logging

__version__ = "0.1.0"

# Configure logging to print to console
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)
