import argparse
import logging

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt  # NOQA: E402
import numpy as np
import pandas as pd
from tqdm import tqdm

from benchmarking import (BenchmarkRunner, karger_trials, plot_success_rates,
                          repeated_min_cut, success_interval)
from graph_generators.barabasi_albert import generate_ba
from graph_generators.cliques import bridge_cut, complete_graph, two_cliques
from graph_generators.erdos_renyi import generate_er
from min_cut.contraction import ContractionStats, make_rng
from min_cut.cut import Cut, cut_weight
from min_cut.karger import karger_min_cut
from min_cut.karger_stein import karger_stein_min_cut
from min_cut.log import init_logger

logger = logging.getLogger('min_cut')

RNG_SEED = 42
BENCHMARK_CSV = "benchmark_results.csv"

# Graph sizes (n); Karger-Stein is O(n^2 log n) per run, keep n small
BENCHMARK_N_VALUES = [10, 20, 30, 40]

ALGORITHMS = {
    'karger': karger_min_cut,
    'karger_stein': karger_stein_min_cut,
}

GENERATORS = {
    'ER': generate_er,
    'BA': generate_ba,
}

MODEL_PARAMS = {
    'ER': {'p': 0.3, 'max_weight': 9},
    'BA': {'m': 3, 'max_weight': 9},
}


def build_graph(args):
    if args.graph == 'cliques':
        graph = two_cliques(args.k)
        # the bridge is the only minimum cut
        expected_cut = Cut(*bridge_cut(args.k))
        return graph, cut_weight(graph, expected_cut), expected_cut
    graph = complete_graph(args.n)
    return graph, args.n - 1, None


def success_probability(algorithm, graph, min_weight, expected_cut, trials, rng):
    """Fraction of single runs returning a minimum cut, plus contractions per run."""
    stats = ContractionStats()
    hits = 0
    for _ in tqdm(range(trials), desc=f"Running {algorithm.__name__}"):
        cut = algorithm(graph, rng, stats)
        if expected_cut is not None:
            hits += cut == expected_cut
        else:
            hits += cut_weight(graph, cut) == min_weight
    return hits, stats.contractions / trials


def run_benchmark(args):
    runner = BenchmarkRunner(ALGORITHMS, GENERATORS, seed=args.seed)
    results_df = runner.run(
        models=list(GENERATORS),
        n_values=BENCHMARK_N_VALUES,
        trials=args.trials,
        model_params=MODEL_PARAMS,
        repetitions=args.repetitions,
    )

    pd.set_option("display.width", 1000)
    pd.set_option("display.max_rows", None)

    print("\nBenchmark Results:")
    print(results_df)

    results_df.to_csv(BENCHMARK_CSV, index=False)
    print(f"\nResults saved to {BENCHMARK_CSV}")
    if args.plot:
        plot_success_rates(results_df, args.plot)
        print(f"Plot saved to {args.plot}")


def main():
    parser = argparse.ArgumentParser(description="Randomized contraction min cut demo")

    parser.add_argument("--graph", type=str, default="cliques",
                        choices=["cliques", "complete"],
                        help="Two k-cliques joined by a bridge, or K_n")
    parser.add_argument("--k", type=int, default=4,
                        help="Clique size for --graph cliques")
    parser.add_argument("--n", type=int, default=10,
                        help="Number of vertices for --graph complete")
    parser.add_argument("--trials", type=int, default=1000,
                        help="Independent runs per algorithm")
    parser.add_argument("--eps", type=float, default=0.01,
                        help="Failure probability for the repeated Karger run")
    parser.add_argument("--seed", type=int, default=RNG_SEED)
    parser.add_argument("--plot", type=str, default=None,
                        help="Save a success-rate bar chart to this path")
    parser.add_argument("--benchmark", action="store_true",
                        help="Benchmark both algorithms on random ER and BA graphs instead")
    parser.add_argument("--repetitions", type=int, default=5,
                        help="Runs per graph in --benchmark mode, lightest cut kept")
    parser.add_argument("--verbose", action="store_true",
                        help="Log every contraction")

    args = parser.parse_args()
    init_logger(logging.DEBUG if args.verbose else logging.INFO)
    if args.benchmark:
        run_benchmark(args)
        return

    rng = make_rng(args.seed)

    graph, min_weight, expected_cut = build_graph(args)

    print("graph:")
    print(graph.matrix)
    if expected_cut is not None:
        print(f"min-cut: {expected_cut} (weight {min_weight})")
    else:
        print(f"min-cut weight: {min_weight}")

    rates = {}
    for name, algorithm in ALGORITHMS.items():
        hits, contractions = success_probability(
            algorithm, graph, min_weight, expected_cut, args.trials, rng)
        low, high = success_interval(hits, args.trials)
        rates[name] = (hits / args.trials, low, high)
        print(f"{name}: success probability {hits / args.trials:.4f} "
              f"(95% CI {low:.4f}-{high:.4f}), {contractions:.1f} contractions per run")

    T = karger_trials(graph.size, args.eps)
    cut, weight = repeated_min_cut(karger_min_cut, graph, T, rng)
    print(f"best of {T} karger runs: {cut} (weight {weight})")
    logger.info("best of %d runs found weight %d, expected %d", T, weight, min_weight)

    if args.plot:
        names = list(rates)
        values = np.array([rates[name][0] for name in names])
        errors = np.array([[rates[name][0] - rates[name][1] for name in names],
                           [rates[name][2] - rates[name][0] for name in names]])
        fig, ax = plt.subplots(figsize=(5, 4))
        ax.bar(names, values, yerr=errors, capsize=4, color=["tab:blue", "tab:orange"])
        ax.set_ylabel("Success Probability")
        ax.set_ylim(0.0, 1.05)
        ax.set_title(f"Single-run success, {args.trials} trials")
        fig.savefig(args.plot, dpi=150, bbox_inches="tight")
        plt.close(fig)
        print(f"Plot saved to {args.plot}")


if __name__ == "__main__":
    main()
