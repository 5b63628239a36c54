"""
Binary Heap Demo -- Build-heap, step-by-step extraction, position-based removal,
priority-pruned search, operation scaling, and nth-smallest selection.

Generates:
- viz/*.png -- Individual visualization files
- report.pdf -- Comprehensive PDF report
"""

import sys
import time
from pathlib import Path

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.backends.backend_pdf import PdfPages

sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))
from binary_heap import BinaryHeap, Priority
from heap_exercises import find_nth_smallest, min_heap_extraction_steps, is_valid_heap

SEED = 42
np.random.seed(SEED)

VIZ_DIR = Path(__file__).parent / "viz"
VIZ_DIR.mkdir(exist_ok=True)

COLORS = {
    "blue": "#3498db",
    "red": "#e74c3c",
    "orange": "#f39c12",
    "green": "#27ae60",
    "purple": "#9b59b6",
    "dark": "#2c3e50",
    "light": "#ecf0f1",
}

SAMPLE = [3, 10, 18, 5, 21, 100]


def draw_tree(ax, values, title, highlight=None):
    """Draw an array-encoded complete binary tree on ``ax``."""
    ax.set_title(title, fontsize=10, fontweight="bold")
    ax.axis("off")
    n = len(values)
    if n == 0:
        ax.text(0.5, 0.5, "(empty)", ha="center", va="center", fontsize=11,
                color="gray", transform=ax.transAxes)
        return

    idx = np.arange(n)
    levels = np.floor(np.log2(idx + 1)).astype(int)
    offsets = idx - (2 ** levels - 1)
    xs = (offsets + 0.5) / 2.0 ** levels
    ys = -levels.astype(float)

    for i in range(1, n):
        parent = (i - 1) // 2
        ax.plot([xs[parent], xs[i]], [ys[parent], ys[i]], color=COLORS["dark"],
                linewidth=1, zorder=1)

    highlight = set(highlight or [])
    face = [COLORS["orange"] if i in highlight else COLORS["blue"] for i in range(n)]
    ax.scatter(xs, ys, s=700, c=face, edgecolors="white", linewidths=1.5, zorder=2)
    for i in range(n):
        ax.text(xs[i], ys[i], str(values[i]), ha="center", va="center",
                fontsize=9, color="white", fontweight="bold", zorder=3)
        ax.text(xs[i], ys[i] - 0.32, f"[{i}]", ha="center", va="center",
                fontsize=7, color="gray", zorder=3)
    ax.set_xlim(-0.05, 1.05)
    ax.set_ylim(ys.min() - 0.6, 0.5)


# ---------------------------------------------------------------------------
# Example 1: Build-Heap
# ---------------------------------------------------------------------------
def example_1_build_heap():
    """Show an unordered list before and after bottom-up construction."""
    print("=" * 60)
    print("Example 1: Build-Heap")
    print("=" * 60)

    min_heap = BinaryHeap(SAMPLE, Priority.MIN)
    max_heap = BinaryHeap(SAMPLE, Priority.MAX)
    print(f"\n  Input:    {SAMPLE}")
    print(f"  Min-heap: {min_heap!r}  valid={is_valid_heap(min_heap.elements, Priority.MIN)}")
    print(f"  Max-heap: {max_heap!r}  valid={is_valid_heap(max_heap.elements, Priority.MAX)}")

    fig, axes = plt.subplots(1, 3, figsize=(16, 4.5))
    draw_tree(axes[0], SAMPLE, "Input array as a tree\n(heap property not yet enforced)")
    draw_tree(axes[1], min_heap.elements, "After build-heap (min)\nsmallest value at the root",
              highlight=[0])
    draw_tree(axes[2], max_heap.elements, "After build-heap (max)\nlargest value at the root",
              highlight=[0])
    fig.suptitle("Build-Heap: Sift Down Every Non-Leaf, Last to First",
                 fontsize=14, fontweight="bold", y=1.02)
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "01_build_heap.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    print(f"\n  Saved: viz/01_build_heap.png")


# ---------------------------------------------------------------------------
# Example 2: Step-by-Step Extraction
# ---------------------------------------------------------------------------
def example_2_extraction_steps():
    """Visually construct the sorted output by removing the root repeatedly."""
    print("\n" + "=" * 60)
    print("Example 2: Step-by-Step Min-Heap Extraction")
    print("=" * 60)

    print()
    for step in min_heap_extraction_steps(SAMPLE):
        print(f"  {step}")

    heap = BinaryHeap(SAMPLE, Priority.MIN)
    snapshots = [(heap.elements, [])]
    extracted = []
    while heap:
        extracted.append(heap.remove())
        snapshots.append((heap.elements, list(extracted)))

    cols = 4
    rows = int(np.ceil(len(snapshots) / cols))
    fig, axes = plt.subplots(rows, cols, figsize=(4.5 * cols, 3.8 * rows))
    axes = np.atleast_1d(axes).ravel()
    for ax, (elements, out) in zip(axes, snapshots):
        draw_tree(ax, elements, f"extracted: {out}", highlight=[0] if elements else None)
    for ax in axes[len(snapshots):]:
        ax.axis("off")
    fig.suptitle("Repeated remove() on a Min-Heap Yields Ascending Order",
                 fontsize=14, fontweight="bold", y=1.01)
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "02_extraction_steps.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    print(f"\n  Saved: viz/02_extraction_steps.png")


# ---------------------------------------------------------------------------
# Example 3: remove_at and index_of
# ---------------------------------------------------------------------------
def example_3_remove_at_and_search():
    """Remove from the middle of the heap and search with subtree pruning."""
    print("\n" + "=" * 60)
    print("Example 3: remove_at and index_of")
    print("=" * 60)

    heap = BinaryHeap([1, 12, 3, 4, 1, 6, 8, 7])
    before = heap.elements
    print(f"\n  Max-heap: {heap!r}")
    for value in [7, 1, 5, 100]:
        print(f"  index_of({value}) -> {heap.index_of(value)}")

    target = heap.index_of(7)
    removed = heap.remove_at(target)
    after = heap.elements
    print(f"\n  remove_at({target}) -> {removed}")
    print(f"  Heap now: {heap!r}  valid={is_valid_heap(after, Priority.MAX)}")
    print(f"  remove_at({len(heap) + 3}) -> {heap.remove_at(len(heap) + 3)} (out of range)")

    fig, axes = plt.subplots(1, 2, figsize=(12, 4.5))
    draw_tree(axes[0], before, f"Before: remove_at({target}) targets {before[target]}",
              highlight=[target, len(before) - 1])
    draw_tree(axes[1], after, "After: last element swapped in,\nthen sifted down and up",
              highlight=[target] if target < len(after) else None)
    fig.suptitle("Position-Based Removal Keeps the Tree Complete",
                 fontsize=14, fontweight="bold", y=1.03)
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "03_remove_at.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    print(f"\n  Saved: viz/03_remove_at.png")


# ---------------------------------------------------------------------------
# Example 4: Operation Scaling
# ---------------------------------------------------------------------------
def example_4_scaling():
    """Time build-heap against repeated insert, and a full drain."""
    print("\n" + "=" * 60)
    print("Example 4: Operation Scaling")
    print("=" * 60)

    sizes = [250, 500, 1000, 2000, 4000, 8000, 16000]
    build_ms, insert_ms, drain_ms = [], [], []
    print(f"\n  {'n':>7} | {'build (ms)':>11} | {'n x insert (ms)':>15} | {'drain (ms)':>11}")
    for n in sizes:
        values = np.random.randint(0, 1_000_000, size=n).tolist()

        start = time.perf_counter()
        heap = BinaryHeap(values, Priority.MIN)
        build_ms.append((time.perf_counter() - start) * 1000)

        start = time.perf_counter()
        incremental = BinaryHeap(priority=Priority.MIN)
        for v in values:
            incremental.insert(v)
        insert_ms.append((time.perf_counter() - start) * 1000)

        start = time.perf_counter()
        while heap:
            heap.remove()
        drain_ms.append((time.perf_counter() - start) * 1000)

        print(f"  {n:>7} | {build_ms[-1]:>11.2f} | {insert_ms[-1]:>15.2f} | {drain_ms[-1]:>11.2f}")

    sizes_arr = np.array(sizes, dtype=float)
    fig, axes = plt.subplots(1, 2, figsize=(14, 5))
    axes[0].plot(sizes, build_ms, "o-", color=COLORS["green"], linewidth=2, label="build-heap (O(n))")
    axes[0].plot(sizes, insert_ms, "s-", color=COLORS["red"], linewidth=2,
                 label="n x insert (O(n log n))")
    axes[0].set_xlabel("n")
    axes[0].set_ylabel("Time (ms)")
    axes[0].set_title("Bulk Construction vs Incremental Insert", fontsize=10, fontweight="bold")
    axes[0].legend()
    axes[0].grid(True, alpha=0.3)

    per_op_us = np.array(drain_ms) * 1000 / sizes_arr
    reference = per_op_us[0] * np.log2(sizes_arr) / np.log2(sizes_arr[0])
    axes[1].plot(sizes, per_op_us, "o-", color=COLORS["purple"], linewidth=2, label="remove() per op")
    axes[1].plot(sizes, reference, "--", color="gray", label="log2(n) reference")
    axes[1].set_xscale("log", base=2)
    axes[1].set_xlabel("n")
    axes[1].set_ylabel("Time per remove (us)")
    axes[1].set_title("Root Removal Grows Logarithmically", fontsize=10, fontweight="bold")
    axes[1].legend()
    axes[1].grid(True, alpha=0.3)

    fig.suptitle("Heap Operation Costs", fontsize=14, fontweight="bold", y=1.02)
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "04_scaling.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    print(f"\n  Saved: viz/04_scaling.png")


# ---------------------------------------------------------------------------
# Example 5: nth-Smallest Selection
# ---------------------------------------------------------------------------
def example_5_nth_smallest():
    """Compare repeated removal with reading heap.elements[nth] directly."""
    print("\n" + "=" * 60)
    print("Example 5: nth-Smallest Selection")
    print("=" * 60)

    print(f"\n  Input: {SAMPLE}")
    for nth in range(len(SAMPLE)):
        print(f"  find_nth_smallest(nth={nth}) -> {find_nth_smallest(SAMPLE, nth)}")

    trials = 300
    n = 31
    positions = np.arange(n)
    wrong = np.zeros(n)
    for _ in range(trials):
        values = np.random.permutation(n * 3)[:n].tolist()
        ordered = sorted(values)
        array_order = BinaryHeap(values, Priority.MIN).elements
        for nth in range(n):
            assert find_nth_smallest(values, nth) == ordered[nth]
            if array_order[nth] != ordered[nth]:
                wrong[nth] += 1
    error_rate = wrong / trials
    print(f"\n  Direct array read wrong in {error_rate[1:].mean():.0%} of reads past the root "
          f"({trials} random lists of {n})")

    fig, ax = plt.subplots(figsize=(11, 4.5))
    ax.bar(positions, error_rate, color=COLORS["red"], edgecolor="white", label="elements[nth]")
    ax.axhline(0, color=COLORS["green"], linewidth=3, label="repeated remove()")
    ax.set_xlabel("nth (0-based)")
    ax.set_ylabel("Fraction of wrong answers")
    ax.set_ylim(0, 1.05)
    ax.set_title("Only the Root Is in Sorted Position After Build-Heap\n"
                 "Reading the array directly is not an order statistic",
                 fontsize=11, fontweight="bold")
    ax.legend()
    ax.grid(True, alpha=0.3, axis="y")
    fig.tight_layout()
    fig.savefig(VIZ_DIR / "05_nth_smallest.png", dpi=150, bbox_inches="tight")
    plt.close(fig)
    print(f"\n  Saved: viz/05_nth_smallest.png")


def generate_pdf_report():
    """Bundle the saved figures into a single PDF."""
    print("\n" + "=" * 60)
    print("Generating PDF Report")
    print("=" * 60)

    report_path = Path(__file__).parent / "report.pdf"
    viz_files = sorted(VIZ_DIR.glob("*.png"))

    with PdfPages(str(report_path)) as pdf:
        fig, ax = plt.subplots(figsize=(11, 8.5))
        ax.axis("off")
        ax.text(0.5, 0.78, "Binary Heap", fontsize=24, fontweight="bold",
                ha="center", va="center", transform=ax.transAxes)
        ax.text(0.5, 0.68, "Array-Backed Priority Queue with Max and Min Orderings",
                fontsize=13, ha="center", va="center", transform=ax.transAxes, color="gray")
        info_text = (
            "A complete binary tree stored in a list: children of i live at\n"
            "2i + 1 and 2i + 2, the parent at (i - 1) // 2. Every parent has\n"
            "priority at least that of its children.\n\n"
            "This demo covers:\n"
            "  1. Build-heap: O(n) bottom-up construction\n"
            "  2. Step-by-step extraction from a min-heap\n"
            "  3. remove_at and priority-pruned index_of\n"
            "  4. Scaling of build, insert and remove\n"
            "  5. nth-smallest selection by repeated removal\n\n"
            f"Random seed: {SEED}\n"
            f"Number of visualizations: {len(viz_files)}"
        )
        ax.text(0.5, 0.32, info_text, fontsize=11, ha="center", va="center",
                transform=ax.transAxes, linespacing=1.6)
        ax.text(0.5, 0.06, "Generated by demo.py", fontsize=10, ha="center",
                va="center", transform=ax.transAxes, style="italic", color="gray")
        pdf.savefig(fig)
        plt.close(fig)

        for viz_file in viz_files:
            fig = plt.figure(figsize=(11, 8.5))
            title = viz_file.stem.split("_", 1)[1].replace("_", " ").title()
            fig.suptitle(title, fontsize=14, fontweight="bold", y=0.98)

            img = plt.imread(str(viz_file))
            ax = fig.add_axes([0.02, 0.02, 0.96, 0.92])
            ax.imshow(img)
            ax.axis("off")

            pdf.savefig(fig)
            plt.close(fig)

    print(f"  Report saved: report.pdf ({len(viz_files) + 1} pages)")


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------
def main():
    print("Binary Heap Demo")
    print("=" * 60)
    print(f"Seed: {SEED}")
    print()

    example_1_build_heap()
    example_2_extraction_steps()
    example_3_remove_at_and_search()
    example_4_scaling()
    example_5_nth_smallest()
    generate_pdf_report()

    print("\n" + "=" * 60)
    print("All examples completed successfully.")
    print(f"Visualizations: {VIZ_DIR}/")
    print(f"Report: {Path(__file__).parent / 'report.pdf'}")
    print("=" * 60)


if __name__ == "__main__":
    main()
