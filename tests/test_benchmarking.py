import numpy as np
import pytest

from benchmarking import (BenchmarkRunner, karger_stein_trials, karger_trials,
                          plot_success_rates, repeated_min_cut, success_interval)
from graph_generators.cliques import two_cliques
from graph_generators.erdos_renyi import generate_er
from min_cut.cut import Cut
from min_cut.karger import karger_min_cut
from min_cut.karger_stein import karger_stein_min_cut


def test_karger_trials():
    # C(8, 2) * ln(100) = 128.9...
    assert karger_trials(8, 0.01) == 129
    assert karger_trials(2, 0.5) == 1
    with pytest.raises(ValueError):
        karger_trials(8, 0.0)


def test_karger_stein_trials():
    # log2(8) * ln(100) = 13.8...
    assert karger_stein_trials(8, 0.01) == 14
    assert karger_stein_trials(2, 0.5) == 1
    assert karger_stein_trials(8, 0.01) < karger_trials(8, 0.01)
    with pytest.raises(ValueError):
        karger_stein_trials(8, 1.0)


def test_repeated_min_cut_keeps_lightest(cliques):
    cuts = iter([Cut([0], range(1, 8)), Cut(range(4), range(4, 8)), Cut([7], range(7))])

    def scripted(graph, rng, stats):
        return next(cuts)

    cut, weight = repeated_min_cut(scripted, cliques, 3, None)
    assert weight == 1
    assert cut == Cut(range(4), range(4, 8))


def test_repeated_min_cut_needs_a_trial(cliques, rng):
    with pytest.raises(ValueError):
        repeated_min_cut(karger_min_cut, cliques, 0, rng)


def test_success_interval():
    low, high = success_interval(50, 100)
    assert 0.0 < low < 0.5 < high < 1.0
    assert success_interval(0, 10)[0] == 0.0


def cliques_generator(n, rng):
    return two_cliques(n // 2)


def test_runner(tmp_path):
    runner = BenchmarkRunner(
        {'karger': karger_min_cut, 'karger_stein': karger_stein_min_cut},
        {'ER': generate_er, 'cliques': cliques_generator},
        seed=7)

    df = runner.run(models=['ER', 'cliques', 'missing'],
                    n_values=[8, 10],
                    trials=3,
                    model_params={'ER': {'p': 0.5, 'max_weight': 3}},
                    repetitions=5,
                    progress=False)

    assert len(df) == 2 * 2 * 2
    assert set(df['model']) == {'ER', 'cliques'}
    assert df['success_rate'].between(0.0, 1.0).all()
    assert (df['min_found_cut'] >= 1).all()
    assert (df['success_ci_low'] <= df['success_rate']).all()
    assert (df['success_rate'] <= df['success_ci_high']).all()

    karger_rows = df[df['algorithm'] == 'karger']
    assert (karger_rows['mean_contractions'] <= 8).all()

    cliques_rows = df[df['model'] == 'cliques']
    assert (cliques_rows['mean_true_cut'] == 1).all()

    out = tmp_path / "success.png"
    plot_success_rates(df, str(out))
    assert out.exists()


def test_runner_is_reproducible():
    def run():
        runner = BenchmarkRunner({'karger': karger_min_cut}, {'ER': generate_er}, seed=3)
        df = runner.run(['ER'], [9], 4, {'ER': {'p': 0.5}}, progress=False)
        return df[['mean_cut', 'min_found_cut', 'success_rate']].to_numpy()

    assert np.array_equal(run(), run())
