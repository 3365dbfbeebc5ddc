#!/usr/bin/env python
"""
Demonstration of the MiniTensor API
Builds a few tensors and prints them after dot product, broadcasting,
scalar multiplication and reshape.
"""

import argparse
import logging
import sys

import minitensor as mt


def setup_logging(verbose=False):
    """Send log records to stdout; DEBUG level shows broadcast and reshape details."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )


def main(argv=None):
    """Run the demonstration"""
    parser = argparse.ArgumentParser(description="MiniTensor demonstration")
    parser.add_argument("--verbose", action="store_true", help="enable debug logging")
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    # Two 1D tensors (vectors) of length 3
    vec1 = mt.Tensor([3], 1.0)
    vec2 = mt.Tensor([3], 2.0)

    # Dot product: 1*2 + 1*2 + 1*2
    dot_product = vec1.dot(vec2)
    print(f"Dot product: {dot_product}")

    # 2x3 matrix filled with 5, one element changed
    mat1 = mt.Tensor([2, 3], 5)
    mat1[0, 0] = 10
    mat1.print()

    # Broadcasting over the first dimension
    mat2 = mat1 + mt.Tensor([1, 3], 2)
    mat2.print()

    # Multiply by a scalar
    scaled_mat = mat2 * 3
    scaled_mat.print()

    # Reshape to 3x2, storage order unchanged
    scaled_mat.reshape([3, 2])
    scaled_mat.print()

    # GPU is a label only, computation stays on the CPU
    tensor_gpu = mt.Tensor([2, 2], 1.0, mt.Device.GPU)
    tensor_gpu.print()

    return 0


if __name__ == "__main__":
    sys.exit(main())
