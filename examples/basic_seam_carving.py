"""
Basic seam carving example.

Shows the energy map and the first seam of an image, then shrinks it.

Run:
    python examples/basic_seam_carving.py [image.png] [--width N] [--height M]

Without an image a synthetic test picture is generated. Output goes to the
output/ directory.
"""

import argparse
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

import torch
import matplotlib
matplotlib.use('Agg')  # Non-interactive backend
import matplotlib.pyplot as plt

from seamcarve.energy import dual_gradient_energy
from seamcarve.seam import cumulative_cost, find_seam
from seamcarve.carving import carve_image
from seamcarve.io import load_image, save_image

OUTPUT_DIR = Path(__file__).parent.parent / "output"


def create_test_image(height=120, width=180):
    """Sky, ground and a tall high-contrast tower left of center."""
    image = torch.zeros(3, height, width, dtype=torch.uint8)
    horizon = height * 2 // 3
    image[:, :horizon] = torch.tensor([110, 170, 230], dtype=torch.uint8).view(3, 1, 1)
    image[:, horizon:] = torch.tensor([70, 140, 60], dtype=torch.uint8).view(3, 1, 1)

    x0, x1 = width // 3, width // 3 + width // 10
    image[:, height // 5:horizon, x0:x1] = 40
    for y in range(height // 5, horizon, 6):
        image[:, y:y + 3, x0 + 2:x1 - 2] = 230  # windows
    return image


def visualize_seam(image: torch.Tensor, seam: torch.Tensor):
    """Paint a vertical seam red on a copy of the image."""
    img_vis = image.clone()
    for y, x in enumerate(seam.tolist()):
        img_vis[:, y, x] = torch.tensor([255, 0, 0], dtype=image.dtype)
    return img_vis


def to_display(image: torch.Tensor):
    return image.permute(1, 2, 0).cpu().numpy()


def main():
    parser = argparse.ArgumentParser(description=__doc__,
                                     formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument('image', nargs='?', help="input image (default: synthetic)")
    parser.add_argument('--width', type=int, default=40, help="columns to remove")
    parser.add_argument('--height', type=int, default=20, help="rows to remove")
    args = parser.parse_args()

    OUTPUT_DIR.mkdir(exist_ok=True)

    if args.image:
        print(f"Loading {args.image}...")
        image = load_image(args.image)
    else:
        print("Generating synthetic image...")
        image = create_test_image()
    C, H, W = image.shape
    print(f"Image shape: {C} x {H} x {W}")

    print("Computing energy and first seam...")
    energy = dual_gradient_energy(image)
    seam = find_seam(cumulative_cost(energy))

    fig, axes = plt.subplots(1, 3, figsize=(18, 5))
    axes[0].imshow(to_display(image))
    axes[0].set_title("Input")
    axes[1].imshow(energy.cpu().numpy(), cmap='gray')
    axes[1].set_title("Dual-gradient energy")
    axes[2].imshow(to_display(visualize_seam(image, seam)))
    axes[2].set_title("First vertical seam")
    for ax in axes:
        ax.axis('off')
    plt.tight_layout()
    fig.savefig(OUTPUT_DIR / "energy_and_seam.png", dpi=100)
    plt.close(fig)
    print(f"Saved: {OUTPUT_DIR / 'energy_and_seam.png'}")

    print(f"Carving: removing {args.width} columns and {args.height} rows...")
    carved = carve_image(image, reduce_width_by=args.width, reduce_height_by=args.height)
    save_image(carved, OUTPUT_DIR / "carved.png")
    print(f"Saved: {OUTPUT_DIR / 'carved.png'} ({carved.shape[2]} x {carved.shape[1]})")

    print("\nDone! Check the output/ directory for results.")


if __name__ == '__main__':
    main()
