#!/usr/bin/env python3

from matplotlib import pyplot as plt
import numpy as np
import json
from pathlib import Path

script_dir = Path(__file__).parent.absolute()


def load_results(path):
    with open(path, "r") as f:
        return json.load(f)


def plot_results(results, output_dir):
    output_dir = Path(output_dir)
    output_dir.mkdir(exist_ok=True)

    names = list(results)
    seconds = [results[name]["seconds"] for name in names]
    # Wrong output still gets a bar, in red
    colors = ["tab:blue" if results[name]["correct"] else "tab:red" for name in names]

    plt.bar(names, seconds, color=colors)
    if seconds:
        plt.axhline(np.mean(seconds), color="tab:gray", linestyle="--", label="mean")
        plt.legend()

    plt.xlabel("Variant")
    plt.ylabel("Seconds")
    plt.title("FizzBuzz variants")
    plt.gcf().set_size_inches(12, 8)

    output = output_dir / "timings.png"
    plt.savefig(output)
    plt.clf()
    return output


def main():
    results = load_results(script_dir / "results.json")
    plot_results(results, script_dir / "results")


if __name__ == "__main__":
    main()
