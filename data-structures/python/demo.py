"""
AVL Tree Demo — height against the AVL bound, churn behaviour, text dumps,
and linked vs array traversal agreement.

Generates:
- viz/*.png — Individual visualization files
- report.pdf — Comprehensive PDF report
"""

import sys
from pathlib import Path

import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.backends.backend_pdf import PdfPages

sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))
from avl_tree import AVLTree
from array_binary_tree import ArrayBinaryTree

SEED = 42
np.random.seed(SEED)

VIZ_DIR = Path(__file__).parent / "viz"
VIZ_DIR.mkdir(exist_ok=True)
REPORT_PATH = Path(__file__).parent / "report.pdf"

COLORS = {
    "blue": "#3498db",
    "red": "#e74c3c",
    "green": "#27ae60",
    "orange": "#f39c12",
    "purple": "#9b59b6",
    "dark": "#2c3e50",
}

MAX_SORTED_N = 2048
CHURN_TRIALS = 200
CHURN_SIZE = 1000

all_figures = []


def save_fig(fig, name, title=None):
    fig.savefig(VIZ_DIR / name, dpi=150, bbox_inches="tight")
    all_figures.append({"fig_path": VIZ_DIR / name, "title": title or name})
    plt.close(fig)


def avl_bound(n):
    return 1.44 * np.log2(n + 2) - 0.328


def build(values):
    tree = AVLTree()
    for v in values:
        tree.insert(v)
    return tree


def text_figure(title, blocks):
    fig, axes = plt.subplots(1, len(blocks), figsize=(5 * len(blocks), 4.5))
    for ax, (caption, text) in zip(np.atleast_1d(axes), blocks):
        ax.text(0.5, 0.5, text, ha="center", va="center", family="monospace", fontsize=11)
        ax.set_title(caption, fontsize=10)
        ax.axis("off")
    fig.suptitle(title, fontsize=13, fontweight="bold")
    fig.tight_layout()
    return fig


# ─────────────────────────────────────────────────────────────
# Example 1: Ascending insertion stays logarithmic
# ─────────────────────────────────────────────────────────────


def example_1_sorted_insertion():
    print("=" * 60)
    print("Example 1: Ascending Insertion — Height vs n")
    print("=" * 60)

    tree = AVLTree()
    heights = np.empty(MAX_SORTED_N, dtype=int)
    for i in range(MAX_SORTED_N):
        tree.insert(i)
        heights[i] = tree.height()

    n = np.arange(1, MAX_SORTED_N + 1)
    optimal = np.floor(np.log2(n))

    fig, ax = plt.subplots(figsize=(10, 5))
    ax.step(n, heights, where="post", color=COLORS["blue"], label="AVL root height")
    ax.plot(n, avl_bound(n), color=COLORS["red"], linestyle="--", label="1.44·log2(n+2) − 0.328")
    ax.plot(n, optimal, color=COLORS["green"], linestyle=":", label="floor(log2 n) (perfect tree)")
    ax.set_xscale("log", base=2)
    ax.set_xlabel("n (values inserted in ascending order)")
    ax.set_ylabel("Root height (edges)")
    ax.set_title("Rotations keep ascending insertion balanced")
    ax.legend()
    ax.grid(True, alpha=0.3)
    fig.tight_layout()
    save_fig(fig, "01_sorted_insertion_height.png", "Ascending Insertion: Height vs AVL Bound")

    within = bool(np.all(heights <= avl_bound(n)))
    print(f"  Final height for n={MAX_SORTED_N}: {heights[-1]}")
    print(f"  Max excess over perfect tree:   {int(np.max(heights - optimal))}")
    print(f"  Within AVL bound for every n:   {within}")
    print(f"  Tree valid after all inserts:   {tree.is_valid()}")
    print()


# ─────────────────────────────────────────────────────────────
# Example 2: Random insert/remove churn
# ─────────────────────────────────────────────────────────────


def example_2_random_churn():
    print("=" * 60)
    print("Example 2: Random Churn — Height Distribution")
    print("=" * 60)

    after_insert = np.empty(CHURN_TRIALS, dtype=int)
    after_remove = np.empty(CHURN_TRIALS, dtype=int)
    sizes = np.empty(CHURN_TRIALS, dtype=int)
    all_valid = True
    for trial in range(CHURN_TRIALS):
        values = np.random.permutation(10 * CHURN_SIZE)[:CHURN_SIZE]
        tree = build(values)
        after_insert[trial] = tree.height()
        for v in np.random.choice(values, CHURN_SIZE // 2, replace=False):
            tree.remove(v)
        after_remove[trial] = tree.height()
        sizes[trial] = tree.size()
        all_valid = all_valid and tree.is_valid()

    fig, axes = plt.subplots(1, 2, figsize=(12, 4.5))
    bins = np.arange(min(after_remove.min(), after_insert.min()) - 0.5, after_insert.max() + 1.5)

    axes[0].hist(after_insert, bins=bins, color=COLORS["blue"], alpha=0.7, label=f"n={CHURN_SIZE}")
    axes[0].hist(after_remove, bins=bins, color=COLORS["orange"], alpha=0.7, label=f"n={CHURN_SIZE // 2}")
    axes[0].axvline(avl_bound(CHURN_SIZE), color=COLORS["red"], linestyle="--", label="AVL bound (n=1000)")
    axes[0].set_xlabel("Root height")
    axes[0].set_ylabel("Trials")
    axes[0].set_title("Height after inserting, then removing half")
    axes[0].legend(fontsize=8)
    axes[0].grid(True, alpha=0.3)

    slack = avl_bound(sizes) - after_remove
    axes[1].hist(slack, bins=20, color=COLORS["purple"], alpha=0.7)
    axes[1].set_xlabel("Bound − height")
    axes[1].set_ylabel("Trials")
    axes[1].set_title("Slack under the AVL bound after removals")
    axes[1].grid(True, alpha=0.3)

    fig.suptitle("Random churn keeps height logarithmic", fontsize=13, fontweight="bold")
    fig.tight_layout()
    save_fig(fig, "02_random_churn_heights.png", "Random Churn: Height Distributions")

    print(f"  Trials: {CHURN_TRIALS}, values per trial: {CHURN_SIZE}")
    print(f"  Height after inserts  — mean: {after_insert.mean():.2f}, max: {after_insert.max()}")
    print(f"  Height after removals  — mean: {after_remove.mean():.2f}, max: {after_remove.max()}")
    print(f"  Minimum slack under bound: {slack.min():.3f}")
    print(f"  Every tree valid: {all_valid}")
    print()


# ─────────────────────────────────────────────────────────────
# Example 3: Text dumps of the reference scenarios
# ─────────────────────────────────────────────────────────────


def example_3_scenarios():
    print("=" * 60)
    print("Example 3: Reference Scenarios")
    print("=" * 60)

    ascending = build(range(1, 8))

    single = build([10])
    single.remove(10)

    two_child = build([5, 3, 8, 1, 4, 7, 9])
    before = two_child.describe()
    two_child.remove(3)

    blocks = [
        ("insert 1..7", ascending.describe()),
        ("insert 10, remove 10", single.describe()),
        ("[5,3,8,1,4,7,9] before remove(3)", before),
        ("after remove(3)", two_child.describe()),
    ]
    for caption, text in blocks:
        print(f"  {caption}:")
        for line in text.split("\n"):
            print(f"    {line}")
        print()

    print(f"  Scenario 1 — in-order: {ascending.in_order()}, root: {ascending.root.value}, height: {ascending.height()}")
    print(f"  Scenario 2 — in-order: {single.in_order()}")
    print(f"  Scenario 3 — in-order: {two_child.in_order()}, balanced: {two_child.is_balanced()}")
    print()

    fig = text_figure("Reference scenarios", blocks)
    save_fig(fig, "03_scenarios.png", "Reference Scenarios (Text Dumps)")


# ─────────────────────────────────────────────────────────────
# Example 4: Linked vs array traversal agreement
# ─────────────────────────────────────────────────────────────


def example_4_traversal_agreement():
    print("=" * 60)
    print("Example 4: Linked vs Array Traversals")
    print("=" * 60)

    orders = ["level_order", "pre_order", "in_order", "post_order"]
    trials = 100
    agreement = np.zeros(len(orders), dtype=int)
    for _ in range(trials):
        size = np.random.randint(1, 64)
        tree = build(np.random.permutation(500)[:size])
        mirror = ArrayBinaryTree.from_root(tree.root)
        for k, name in enumerate(orders):
            agreement[k] += getattr(tree, name)() == getattr(mirror, name)()

    tree = build([5, 3, 8, 1, 4, 7, 9])
    mirror = ArrayBinaryTree.from_insertions([5, 3, 8, 1, 4, 7, 9])

    fig, axes = plt.subplots(1, 2, figsize=(12, 4.5))
    axes[0].bar(orders, agreement / trials * 100, color=COLORS["green"], alpha=0.8)
    axes[0].set_ylim(0, 105)
    axes[0].set_ylabel("Agreement (%)")
    axes[0].set_title(f"Snapshot agreement over {trials} random trees")
    axes[0].grid(True, alpha=0.3, axis="y")

    rows = [[", ".join(map(str, getattr(tree, name)())),
             ", ".join(map(str, getattr(mirror, name)()))] for name in orders]
    table = axes[1].table(cellText=rows, rowLabels=orders, colLabels=["AVLTree", "Array mirror"],
                          loc="center", cellLoc="center")
    table.scale(1, 1.6)
    axes[1].axis("off")
    axes[1].set_title("Insertion mirror of [5, 3, 8, 1, 4, 7, 9]")

    fig.suptitle("Linked and array representations visit values identically", fontsize=13, fontweight="bold")
    fig.tight_layout()
    save_fig(fig, "04_traversal_agreement.png", "Linked vs Array Traversal Agreement")

    for name, hits in zip(orders, agreement):
        print(f"  {name:<12} agreed in {hits}/{trials} trees")
    print()


# ─────────────────────────────────────────────────────────────
# PDF Report
# ─────────────────────────────────────────────────────────────


def generate_pdf_report():
    print("=" * 60)
    print("Generating PDF Report")
    print("=" * 60)

    with PdfPages(REPORT_PATH) as pdf:
        fig = plt.figure(figsize=(10, 7.5))
        fig.text(0.5, 0.65, "AVL Tree", ha="center", va="center", fontsize=32, fontweight="bold")
        fig.text(0.5, 0.55, "Height-balanced ordered set of integers", ha="center", va="center",
                 fontsize=20, color="gray")
        fig.text(0.5, 0.30, f"Seed: {SEED}", ha="center", va="center", fontsize=12, color="gray")
        fig.patch.set_facecolor("white")
        pdf.savefig(fig)
        plt.close(fig)

        fig = plt.figure(figsize=(10, 7.5))
        fig.text(0.5, 0.92, "Summary of Findings", ha="center", va="center", fontsize=20, fontweight="bold")
        findings = [
            ("Ascending Insertion", "Rotations keep the root height within one level of a perfect tree."),
            ("Random Churn", "Heights after removals stay under 1.44·log2(n+2) − 0.328."),
            ("Two-Child Removal", "The in-order successor's value replaces the removed value in place."),
            ("Traversal Agreement", "Array snapshots reproduce all four linked traversal orders."),
        ]
        y = 0.82
        for title, desc in findings:
            fig.text(0.08, y, f"  {title}", ha="left", va="center", fontsize=11, fontweight="bold")
            fig.text(0.08, y - 0.035, f"    {desc}", ha="left", va="center", fontsize=9, color="#444444")
            y -= 0.09
        fig.patch.set_facecolor("white")
        pdf.savefig(fig)
        plt.close(fig)

        for entry in all_figures:
            fig = plt.figure(figsize=(10, 7.5))
            img = plt.imread(str(entry["fig_path"]))
            ax = fig.add_axes([0.02, 0.05, 0.96, 0.88])
            ax.imshow(img)
            ax.axis("off")
            fig.text(0.5, 0.97, entry["title"], ha="center", va="top", fontsize=14, fontweight="bold")
            pdf.savefig(fig)
            plt.close(fig)

    print(f"  Report saved to: {REPORT_PATH}")
    print()


# ─────────────────────────────────────────────────────────────
# Main
# ─────────────────────────────────────────────────────────────


def main():
    print()
    print("*" * 60)
    print("  AVL TREE DEMO")
    print("  Balance, Removal, and Traversal Agreement")
    print("*" * 60)
    print()

    example_1_sorted_insertion()
    example_2_random_churn()
    example_3_scenarios()
    example_4_traversal_agreement()
    generate_pdf_report()

    print("=" * 60)
    print("All examples complete!")
    print(f"  Visualizations: {VIZ_DIR}/")
    print(f"  PDF Report:     {REPORT_PATH}")
    print("=" * 60)


if __name__ == "__main__":
    main()
