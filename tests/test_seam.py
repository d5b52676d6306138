"""Tests for seam computation and removal."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import torch
import pytest
from seamcarve.energy import dual_gradient_energy
from seamcarve.seam import neighbor_bounds, cumulative_cost, find_seam, remove_seam

from conftest import make_uniform_image, make_random_image, make_stripe_image


class TestNeighborBounds:
    def test_border_columns_see_two_candidates(self):
        lo, hi = neighbor_bounds(5)
        sizes = (hi - lo + 1).tolist()
        assert sizes == [2, 3, 3, 3, 2]

    def test_bounds_values(self):
        lo, hi = neighbor_bounds(3)
        assert lo.tolist() == [0, 0, 1]
        assert hi.tolist() == [1, 2, 2]

    def test_uniform_3x3_search_sets(self):
        """On a zero-energy 3x3 image the windows are still clamped: 2, 3, 2."""
        energy = dual_gradient_energy(make_uniform_image(3, 3))
        assert (energy == 0).all()
        lo, hi = neighbor_bounds(energy.shape[1])
        assert (hi - lo + 1).tolist() == [2, 3, 2]

    def test_single_column(self):
        lo, hi = neighbor_bounds(1)
        assert lo.tolist() == [0]
        assert hi.tolist() == [0]


class TestCumulativeCost:
    def test_top_row_is_energy(self):
        energy = torch.rand(4, 6, dtype=torch.float64)
        cost = cumulative_cost(energy)
        assert torch.equal(cost[0], energy[0])

    def test_known_table(self):
        energy = torch.tensor([[1.0, 4.0, 3.0, 5.0],
                               [2.0, 1.0, 6.0, 1.0],
                               [3.0, 3.0, 1.0, 2.0]], dtype=torch.float64)
        cost = cumulative_cost(energy)
        expected = torch.tensor([[1.0, 4.0, 3.0, 5.0],
                                 [3.0, 2.0, 9.0, 4.0],
                                 [5.0, 5.0, 3.0, 6.0]], dtype=torch.float64)
        assert torch.equal(cost, expected)

    def test_no_wrap_around(self):
        """The last column must not see column 0 of the row above."""
        energy = torch.tensor([[0.0, 9.0, 9.0],
                               [0.0, 0.0, 0.0]], dtype=torch.float64)
        cost = cumulative_cost(energy)
        assert cost[1].tolist() == [0.0, 0.0, 9.0]

    def test_single_column(self):
        energy = torch.tensor([[1.0], [2.0], [3.0]], dtype=torch.float64)
        cost = cumulative_cost(energy)
        assert cost[:, 0].tolist() == [1.0, 3.0, 6.0]

    def test_matches_brute_force(self):
        """Every entry equals the cheapest of all connected paths reaching it."""
        torch.manual_seed(7)
        H, W = 4, 4
        energy = torch.rand(H, W, dtype=torch.float64)
        cost = cumulative_cost(energy)

        best = {(x, 0): energy[0, x].item() for x in range(W)}
        for y in range(1, H):
            for x in range(W):
                prev = [best[(p, y - 1)] for p in range(max(0, x - 1), min(W, x + 2))]
                best[(x, y)] = energy[y, x].item() + min(prev)
        for (x, y), value in best.items():
            assert cost[y, x].item() == pytest.approx(value)


class TestFindSeam:
    def test_seam_follows_zero_energy_column(self):
        """Given an energy map that's zero in one column, the seam goes there."""
        energy = torch.ones(20, 20, dtype=torch.float64)
        energy[:, 10] = 0.0
        seam = find_seam(cumulative_cost(energy))
        assert (seam == 10).all(), f"Expected all 10, got {seam.tolist()}"

    def test_seam_follows_diagonal_valley(self):
        """Seam should follow a diagonal zero-energy path."""
        H, W = 20, 20
        energy = torch.ones(H, W, dtype=torch.float64) * 10.0
        for i in range(H):
            energy[i, min(5 + i, W - 1)] = 0.0
        seam = find_seam(cumulative_cost(energy))
        for i in range(H):
            expected = min(5 + i, W - 1)
            assert seam[i].item() == expected, f"Row {i}: got {seam[i]}, expected {expected}"

    def test_seam_continuity(self):
        """Adjacent seam indices must differ by at most 1."""
        torch.manual_seed(42)
        energy = torch.rand(50, 50, dtype=torch.float64)
        seam = find_seam(cumulative_cost(energy))
        diffs = torch.abs(seam[1:] - seam[:-1])
        assert diffs.max() <= 1

    def test_seam_length_matches_height(self):
        seam = find_seam(torch.rand(30, 40, dtype=torch.float64))
        assert seam.shape == (30,)

    def test_bottom_tie_picks_lowest_index(self):
        cost = torch.tensor([[5.0, 5.0, 5.0, 5.0],
                             [9.0, 2.0, 9.0, 2.0]], dtype=torch.float64)
        seam = find_seam(cost)
        assert seam.tolist() == [0, 1]

    def test_backtrace_tie_picks_lowest_index(self):
        cost = torch.tensor([[4.0, 1.0, 1.0, 1.0],
                             [7.0, 7.0, 0.0, 7.0]], dtype=torch.float64)
        seam = find_seam(cost)
        assert seam.tolist() == [1, 2]

    def test_border_backtrace_is_clamped(self):
        """From x=0 only columns 0 and 1 are candidates, never the last one."""
        cost = torch.tensor([[3.0, 2.0, 0.0],
                             [0.0, 5.0, 5.0]], dtype=torch.float64)
        seam = find_seam(cost)
        assert seam.tolist() == [1, 0]

    def test_all_zero_costs(self):
        seam = find_seam(torch.zeros(3, 3, dtype=torch.float64))
        assert seam.tolist() == [0, 0, 0]


class TestRemoveSeam:
    def test_removes_one_pixel_per_row(self):
        """Each row equals the original row with the seam pixel spliced out."""
        image = make_random_image(6, 8, seed=1)
        original = image.clone()
        seam = remove_seam(image, width=8, height=6)

        for y in range(6):
            x = seam[y].item()
            expected = torch.cat([original[:, y, :x], original[:, y, x + 1:]], dim=1)
            assert torch.equal(image[:, y, :7], expected)

    def test_seam_is_connected(self):
        image = make_random_image(15, 10, seed=5)
        seam = remove_seam(image, width=10, height=15)
        assert seam.shape == (15,)
        assert torch.abs(seam[1:] - seam[:-1]).max() <= 1

    def test_pixels_outside_active_region_untouched(self):
        image = make_random_image(6, 10, seed=2)
        original = image.clone()
        remove_seam(image, width=7, height=5)

        assert torch.equal(image[:, :, 7:], original[:, :, 7:])
        assert torch.equal(image[:, 5:, :], original[:, 5:, :])

    def test_horizontal_removes_one_pixel_per_column(self):
        image = make_random_image(8, 6, seed=3)
        original = image.clone()
        seam = remove_seam(image, width=8, height=6, direction='horizontal')

        for x in range(6):
            y = seam[x].item()
            expected = torch.cat([original[:, :y, x], original[:, y + 1:, x]], dim=1)
            assert torch.equal(image[:, :7, x], expected)

    def test_horizontal_matches_transposed_vertical(self):
        """Removing a horizontal seam equals removing a vertical seam of the transpose."""
        image = make_random_image(7, 9, seed=4)
        transposed = image.transpose(1, 2).contiguous()

        seam_h = remove_seam(image, width=7, height=9, direction='horizontal')
        seam_v = remove_seam(transposed, width=7, height=9, direction='vertical')

        assert torch.equal(seam_h, seam_v)
        assert torch.equal(image.transpose(1, 2), transposed)

    def test_stripe_column_is_removed(self):
        image = make_stripe_image()
        seam = remove_seam(image, width=4, height=3)
        assert seam.tolist() == [2, 2, 2]

    def test_deterministic(self):
        a = make_random_image(10, 10, seed=9)
        b = a.clone()
        seam_a = remove_seam(a, 10, 10)
        seam_b = remove_seam(b, 10, 10)
        assert torch.equal(seam_a, seam_b)
        assert torch.equal(a, b)

    def test_width_one(self):
        image = make_random_image(4, 1, seed=6)
        seam = remove_seam(image, width=1, height=4)
        assert seam.tolist() == [0, 0, 0, 0]

    def test_invalid_direction(self):
        with pytest.raises(ValueError):
            remove_seam(make_random_image(3, 3), 3, 3, direction='diagonal')
