"""Shared test fixtures for the seam carving test suite."""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import torch
import pytest


def make_stripe_image(H=3, W=4, stripe_col=2):
    """Black/white checkerboard with one constant gray column.

    Returns a (3, H, W) uint8 tensor.
    """
    image = torch.zeros(3, H, W, dtype=torch.uint8)
    for y in range(H):
        for x in range(W):
            image[:, y, x] = 255 if (x + y) % 2 else 0
    image[:, :, stripe_col] = 128
    return image


def make_uniform_image(H, W, value=(90, 120, 200)):
    """Solid-color (3, H, W) uint8 image."""
    image = torch.zeros(3, H, W, dtype=torch.uint8)
    for c, v in enumerate(value):
        image[c] = v
    return image


def make_random_image(H, W, seed=0):
    """Random (3, H, W) uint8 image, reproducible via seed."""
    gen = torch.Generator().manual_seed(seed)
    return torch.randint(0, 256, (3, H, W), dtype=torch.uint8, generator=gen)


@pytest.fixture
def stripe_image():
    """4x3 checkerboard with a low-energy stripe at x=2."""
    return make_stripe_image()


@pytest.fixture
def random_image():
    """Random 12x9 RGB image."""
    return make_random_image(9, 12)
