"""
Binary Search Tree Demo — Traversals, removal cases, balance, and shape statistics.

Generates:
- viz/*.png — Individual visualization files
- report.pdf — Comprehensive PDF report
"""

import os
import sys

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.backends.backend_pdf import PdfPages
from pathlib import Path

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "src"))

from binary_search_tree import BinarySearchTree

SEED = 42
SAMPLE = [5, 3, 8, 1, 4, 7, 9]
N_TRIALS = 500
N_VALUES = 63

VIZ_DIR = Path(__file__).parent / "viz"


def build(values):
    bst = BinarySearchTree()
    for value in values:
        bst.insert(value)
    return bst


def layout_tree(bst):
    """Map each node to (x, y): in-order rank for x, negative depth for y."""
    positions = {}
    rank = 0

    def visit(node, depth):
        nonlocal rank
        if node is None:
            return
        visit(node.left, depth + 1)
        positions[id(node)] = (rank, -depth)
        rank += 1
        visit(node.right, depth + 1)

    visit(bst.root, 0)
    return positions


def draw_tree(ax, bst, title, highlight=None):
    positions = layout_tree(bst)
    stack = [bst.root] if bst.root is not None else []
    while stack:
        node = stack.pop()
        x, y = positions[id(node)]
        for child in (node.left, node.right):
            if child is not None:
                cx, cy = positions[id(child)]
                ax.plot([x, cx], [y, cy], color="gray", linewidth=1.5, zorder=1)
                stack.append(child)
        color = "tomato" if node.value == highlight else "steelblue"
        ax.scatter([x], [y], s=600, color=color, zorder=2)
        ax.text(x, y, str(node.value), ha="center", va="center", color="white",
                fontsize=11, fontweight="bold", zorder=3)
    ax.set_title(title)
    ax.axis("off")
    if not positions:
        ax.text(0.5, 0.5, "(empty)", ha="center", va="center", transform=ax.transAxes)


def example_1_traversals():
    """Build the sample tree and print every traversal order."""
    print("=" * 60)
    print(f"Example 1: Traversals of {SAMPLE}")
    print("=" * 60)

    bst = build(SAMPLE)
    print(f"Pre-order:           {bst.dfs_pre_order()}")
    print(f"In-order:            {bst.dfs_in_order()}")
    print(f"In-order (iterative) {bst.dfs_in_order_iterative()}")
    print(f"Post-order:          {bst.dfs_post_order()}")
    print(f"Breadth-first:       {bst.bfs()}")
    print(f"Second highest:      {bst.find_second_highest()}")

    fig, ax = plt.subplots(figsize=(7, 5))
    draw_tree(ax, bst, f"Tree built from {SAMPLE}")
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "01_traversals.png", dpi=150)
    plt.close(fig)

    return fig, bst


def example_2_removal():
    """Walk through the leaf, one-child and two-children removal cases."""
    print("\n" + "=" * 60)
    print("Example 2: Removal Cases")
    print("=" * 60)

    bst = build(SAMPLE)
    steps = [(1, "leaf"), (3, "one child"), (5, "two children (root)")]

    fig, axes = plt.subplots(1, len(steps) + 1, figsize=(16, 4.5))
    draw_tree(axes[0], bst, "Initial", highlight=steps[0][0])
    for ax, (value, case) in zip(axes[1:], steps):
        removed = bst.remove(value)
        print(f"remove({value}) [{case}] -> {removed!r}, in-order = {bst.dfs_in_order()}")
        draw_tree(ax, bst, f"After removing {value} ({case})")

    fig.tight_layout()
    fig.savefig(VIZ_DIR / "02_removal.png", dpi=150)
    plt.close(fig)

    return fig, bst


def example_3_balance():
    """Compare a degenerate chain with a perfectly balanced tree."""
    print("\n" + "=" * 60)
    print("Example 3: Balance Check")
    print("=" * 60)

    chain = build([1, 2, 3, 4, 5])
    perfect = build([3, 1, 5, 0, 2, 4, 6])
    print(f"Chain   [1..5]:          balanced = {chain.is_balanced()}, height = {chain.height()}")
    print(f"Perfect [3,1,5,0,2,4,6]: balanced = {perfect.is_balanced()}, height = {perfect.height()}")

    fig, axes = plt.subplots(1, 2, figsize=(12, 5))
    draw_tree(axes[0], chain, f"Sorted insertion (balanced={chain.is_balanced()})")
    draw_tree(axes[1], perfect, f"Level insertion (balanced={perfect.is_balanced()})")
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "03_balance.png", dpi=150)
    plt.close(fig)

    return fig, (chain, perfect)


def sorted_insertion_height(n):
    return build(range(n)).height()


def example_4_random_heights():
    """Height distribution of trees built from random insertion orders."""
    print("\n" + "=" * 60)
    print(f"Example 4: Heights over {N_TRIALS} Random Insertion Orders (n={N_VALUES})")
    print("=" * 60)

    rng = np.random.default_rng(SEED)
    heights = np.empty(N_TRIALS, dtype=int)
    balanced = 0
    for i in range(N_TRIALS):
        bst = build(rng.permutation(N_VALUES).tolist())
        heights[i] = bst.height()
        balanced += bst.is_balanced()

    optimal = int(np.ceil(np.log2(N_VALUES + 1)))
    print(f"Optimal height:        {optimal}")
    print(f"Sorted-order height:   {sorted_insertion_height(N_VALUES)}")
    print(f"Random mean height:    {heights.mean():.2f} (std {heights.std():.2f})")
    print(f"Random height range:   [{heights.min()}, {heights.max()}]")
    print(f"Reported balanced:     {balanced}/{N_TRIALS}")

    fig, ax = plt.subplots(figsize=(8, 5))
    bins = np.arange(heights.min(), heights.max() + 2) - 0.5
    ax.hist(heights, bins=bins, color="steelblue", alpha=0.8, edgecolor="white")
    ax.axvline(optimal, color="green", linestyle="--", linewidth=2, label=f"Optimal ({optimal})")
    ax.axvline(heights.mean(), color="red", linewidth=2, label=f"Mean ({heights.mean():.1f})")
    ax.set_xlabel("Tree height")
    ax.set_ylabel("Count")
    ax.set_title(f"BST Height for Random Insertion Orders (n={N_VALUES})")
    ax.legend()
    ax.grid(True, alpha=0.3)
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "04_random_heights.png", dpi=150)
    plt.close(fig)

    return fig, heights


def generate_pdf_report():
    pdf_path = Path(__file__).parent / "report.pdf"

    with PdfPages(pdf_path) as pdf:
        fig = plt.figure(figsize=(11, 8.5))
        fig.text(0.5, 0.6, "Binary Search Tree", fontsize=28, ha="center", fontweight="bold")
        fig.text(0.5, 0.5, "Traversals, removal, balance, and height", fontsize=14, ha="center")
        pdf.savefig(fig)
        plt.close(fig)

        for img_file in sorted(VIZ_DIR.glob("*.png")):
            fig = plt.figure(figsize=(11, 8.5))
            ax = fig.add_axes([0.05, 0.05, 0.9, 0.9])
            ax.imshow(plt.imread(img_file))
            ax.axis("off")
            pdf.savefig(fig)
            plt.close(fig)

    print(f"PDF report saved to: {pdf_path}")
    return pdf_path


def main():
    VIZ_DIR.mkdir(exist_ok=True)

    print("\n" + "#" * 60)
    print("#" + " " * 18 + "BINARY SEARCH TREE DEMO" + " " * 17 + "#")
    print("#" * 60)
    print(f"\nRandom seed: {SEED}")
    print(f"Output directory: {VIZ_DIR}")

    example_1_traversals()
    example_2_removal()
    example_3_balance()
    example_4_random_heights()

    generate_pdf_report()

    print("\n" + "=" * 60)
    print("DEMO COMPLETE")
    print("=" * 60)
    print(f"\nGenerated files:")
    for f in sorted(VIZ_DIR.glob("*.png")):
        print(f"  - {f.relative_to(VIZ_DIR.parent)}")
    print(f"  - report.pdf")


if __name__ == "__main__":
    main()
