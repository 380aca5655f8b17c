import matplotlib.pyplot as plt
import numpy as np
from matplotlib.lines import Line2D
from matplotlib.patches import Circle

from .models import FrequencyTable
from .trees import CodeTableGenerator, iter_preorder

class TreeDisplay:
    def __init__(self, root,
                 fig_size=(10, 6), dpi=100, font_size=10,
                 node_radius=0.12, node_color='navy',
                 edge_color='darkblue', bar_color='blue',
                 entropy_line_color='red', entropy_line_linewidth=2):
        self.root = root
        self.fig_size = fig_size
        self.dpi = dpi
        self.font_size = font_size
        self.node_radius = node_radius
        self.node_color = node_color
        self.edge_color = edge_color
        self.bar_color = bar_color
        self.entropy_line_color = entropy_line_color
        self.entropy_line_linewidth = entropy_line_linewidth
        self.code_table = CodeTableGenerator().generate(root)

    def _layout(self):
        # Leaves are spaced left to right, parents sit above the midpoint of their children.
        nodes = list(iter_preorder(self.root))
        depths = {self.root: 0}
        positions = {}
        leaf_x = 0
        for node in nodes:
            if node.is_leaf:
                positions[node] = (leaf_x, depths[node])
                leaf_x += 1
            else:
                depths[node.left] = depths[node] + 1
                depths[node.right] = depths[node] + 1
        for node in reversed(nodes):
            if not node.is_leaf:
                x = (positions[node.left][0] + positions[node.right][0]) / 2
                positions[node] = (x, depths[node])
        return nodes, positions

    def _finish(self, show_graph, save_path):
        plt.tight_layout()
        if save_path:
            plt.savefig(save_path)
        if show_graph:
            plt.show()
        plt.close()

    def plot_tree(self, show_graph=False, save_path=None):
        nodes, positions = self._layout()
        fig, ax = plt.subplots(figsize=self.fig_size, dpi=self.dpi)

        for node in nodes:
            if node.is_leaf:
                continue
            x1, y1 = positions[node]
            for child, label in ((node.left, "0"), (node.right, "1")):
                x2, y2 = positions[child]
                ax.add_line(Line2D([x1, x2], [-y1, -y2], color=self.edge_color))
                ax.text((x1 + x2) / 2, (-y1 - y2) / 2 + 0.1, label,
                        fontsize=self.font_size, ha='center', va='bottom', color=self.edge_color)

        for node in nodes:
            x, y = positions[node]
            ax.add_patch(Circle((x, -y), self.node_radius, fill=True, facecolor=self.node_color, edgecolor='black'))
            if node.is_leaf:
                code = self.code_table.get_code(node.symbol)
                ax.text(x, -y - 0.2, f"{node.symbol!r}\n{code}\n(p={node.weight:.3g})",
                        fontsize=self.font_size, ha='center', va='top')

        xs = [pos[0] for pos in positions.values()]
        ys = [-pos[1] for pos in positions.values()]
        ax.set_xlim(min(xs) - 1, max(xs) + 1)
        ax.set_ylim(min(ys) - 1.2, max(ys) + 0.5)
        ax.set_title("Huffman Tree (left=0, right=1)", fontsize=self.font_size + 2)
        ax.set_aspect('equal')
        ax.axis('off')
        self._finish(show_graph, save_path)

    def plot_code_lengths(self, frequency_table: FrequencyTable, show_graph=False, save_path=None):
        records = [record for record in frequency_table.items() if self.code_table.contains(record.symbol)]
        if not records:
            print("No data available for Code Lengths.")
            return

        x = np.arange(len(records))
        lengths = np.array([len(self.code_table.get_code(record.symbol)) for record in records])
        information = -np.log2(np.array([record.probability for record in records]))

        plt.figure(figsize=self.fig_size, dpi=self.dpi)
        plt.bar(x, lengths, color=self.bar_color, label="Code length")
        plt.plot(x, information, color=self.entropy_line_color, linewidth=self.entropy_line_linewidth,
                 marker='o', label="-log2(p)")
        plt.xticks(x, [repr(record.symbol) for record in records], fontsize=self.font_size)
        plt.title("Code Length per Symbol", fontsize=self.font_size + 2)
        plt.xlabel("Symbol", fontsize=self.font_size)
        plt.ylabel("Bits", fontsize=self.font_size)
        plt.grid(True)
        plt.legend(fontsize=self.font_size)
        self._finish(show_graph, save_path)
