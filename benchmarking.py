import logging
import math
import time
from typing import Any, Callable, Dict, List, Optional, Tuple

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt  # NOQA: E402
import networkx as nx
import numpy as np
import pandas as pd
from scipy.stats import binomtest
from tqdm import tqdm

from min_cut.contraction import ContractionStats
from min_cut.cut import Cut, cut_weight
from min_cut.weighted_graph import WeightedGraph

logger = logging.getLogger('min_cut')


def karger_trials(n: int, eps: float) -> int:
    """
    Independent Karger runs needed so that the lightest cut is a minimum cut
    with probability at least 1 - eps: C(n, 2) * ln(1 / eps).
    """
    if not 0.0 < eps < 1.0:
        raise ValueError("eps must be in (0, 1)")
    return max(1, int(math.ceil(math.comb(n, 2) * np.log(1.0 / eps))))


def karger_stein_trials(n: int, eps: float) -> int:
    """
    Independent Karger-Stein runs for failure probability at most eps, using
    the Omega(1 / log n) single-run success bound: log2(n) * ln(1 / eps).
    """
    if not 0.0 < eps < 1.0:
        raise ValueError("eps must be in (0, 1)")
    return max(1, int(math.ceil(np.log2(max(2, n)) * np.log(1.0 / eps))))


def repeated_min_cut(algorithm: Callable,
                     graph: WeightedGraph,
                     trials: int,
                     rng: np.random.Generator,
                     stats: Optional[ContractionStats] = None) -> Tuple[Cut, int]:
    """
    Runs algorithm(graph, rng, stats) `trials` times and keeps the lightest cut.

    Returns:
        (Cut, int): best cut and its weight in graph.
    """
    if trials < 1:
        raise ValueError("trials must be >= 1")

    best_cut, best_weight = None, None
    for _ in range(trials):
        cut = algorithm(graph, rng, stats)
        weight = cut_weight(graph, cut)
        if best_weight is None or weight < best_weight:
            best_cut, best_weight = cut, weight
    return best_cut, best_weight


def success_interval(successes: int, trials: int, confidence: float = 0.95) -> Tuple[float, float]:
    """Clopper-Pearson interval for an empirical success probability."""
    ci = binomtest(successes, trials).proportion_ci(confidence_level=confidence)
    return float(ci.low), float(ci.high)


class BenchmarkRunner:
    """
    Handles running benchmarks for different graph models and algorithms.
    """

    def __init__(self,
                 algorithms: Dict[str, Callable],
                 generators: Dict[str, Callable],
                 seed: Optional[int] = None):
        """
        Args:
            algorithms (Dict[str, Callable]):
                Dict of {'algo_name': algorithm_function}
                Each function must accept (graph, rng, stats) and return a Cut.

            generators (Dict[str, Callable]):
                Dict of {'model_name': generator_function}
                Each function must accept n, rng and **kwargs and return a
                connected WeightedGraph.

            seed (Optional[int]):
                Root seed; every trial gets its own child generator.
                If None, randomness is uncontrolled.
        """
        self.algorithms = algorithms
        self.generators = generators
        self.seed_sequence = np.random.SeedSequence(seed)

    def run(self,
            models: List[str],
            n_values: List[int],
            trials: int,
            model_params: Dict[str, Dict[str, Any]],
            repetitions: int = 1,
            progress: bool = True) -> pd.DataFrame:
        """
        Runs the full benchmark.

        Args:
            models (List[str]): List of model names (e.g., ['ER', 'BA']).
            n_values (List[int]): List of graph sizes (n).
            trials (int): Number of graphs generated for each (model, n) pair.
            model_params (Dict): Parameters for each model generator.
                                 e.g., {'ER': {'p': 0.3}, 'BA': {'m': 3}}
            repetitions (int): Independent runs per algorithm and graph; the
                               lightest cut counts as that trial's answer.
            progress (bool): Show a tqdm progress bar per (model, n) pair.

        Returns:
            pd.DataFrame: one row per (model, n, algorithm).
        """
        all_results = []

        for model_name in models:
            if model_name not in self.generators:
                logger.warning("Generator '%s' not found. Skipping.", model_name)
                continue
            gen_func = self.generators[model_name]
            params = model_params.get(model_name, {})

            for n in n_values:
                logger.info("--- Running: Model=%s, n=%d, Trials=%d ---", model_name, n, trials)

                trial_results = {name: {'times': [], 'cuts': [], 'hits': 0, 'contractions': []}
                                 for name in self.algorithms}
                true_cuts = []

                for child in tqdm(self.seed_sequence.spawn(trials),
                                  desc=f"{model_name} n={n}", disable=not progress):
                    rng = np.random.default_rng(child)
                    graph = gen_func(n=n, rng=rng, **params)
                    true_value, _ = nx.stoer_wagner(graph.to_networkx(), weight='weight')
                    true_cuts.append(true_value)

                    for algo_name, algo_func in self.algorithms.items():
                        stats = ContractionStats()

                        start_time = time.perf_counter()
                        _, cut_val = repeated_min_cut(algo_func, graph, repetitions, rng, stats)
                        end_time = time.perf_counter()

                        data = trial_results[algo_name]
                        data['times'].append(end_time - start_time)
                        data['cuts'].append(cut_val)
                        data['contractions'].append(stats.contractions / repetitions)
                        if cut_val == true_value:
                            data['hits'] += 1

                for algo_name, data in trial_results.items():
                    ci_low, ci_high = success_interval(data['hits'], trials)
                    all_results.append({
                        'model': model_name,
                        'n': n,
                        'algorithm': algo_name,
                        'trials': trials,
                        'repetitions': repetitions,
                        'mean_true_cut': np.mean(true_cuts),
                        'success_rate': data['hits'] / trials,
                        'success_ci_low': ci_low,
                        'success_ci_high': ci_high,
                        'mean_time_s': np.mean(data['times']),
                        'std_time_s': np.std(data['times']),
                        'mean_cut': np.mean(data['cuts']),
                        'min_found_cut': np.min(data['cuts']),
                        'max_found_cut': np.max(data['cuts']),
                        'mean_contractions': np.mean(data['contractions']),
                    })

        logger.info("--- Benchmark Complete ---")
        return pd.DataFrame(all_results)


def plot_success_rates(results_df: pd.DataFrame, out_path: str, dpi: int = 150):
    """Success rate vs n, one line per (model, algorithm), saved to out_path."""
    fig, ax = plt.subplots(figsize=(7, 4.5))
    for (model, algo), group in results_df.groupby(['model', 'algorithm']):
        group = group.sort_values('n')
        rate = group['success_rate'].to_numpy()
        yerr = np.clip([rate - group['success_ci_low'].to_numpy(),
                        group['success_ci_high'].to_numpy() - rate], 0.0, None)
        ax.errorbar(group['n'], rate, yerr=yerr,
                    marker='x', capsize=3, label=f"{algo} ({model})")
    ax.set_xlabel("Number of Nodes")
    ax.set_ylabel("Success Rate")
    ax.set_ylim(0.0, 1.05)
    ax.set_title("Empirical Min Cut Success Rate")
    ax.legend()
    fig.savefig(out_path, dpi=dpi, bbox_inches="tight")
    plt.close(fig)
