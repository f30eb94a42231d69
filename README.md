# atelier

Building blocks for modelling market microstructure at high frequency:

- **Stochastic generators** (`atelier.probabilistic`, `atelier.brownian`,
  `atelier.hawkes`): uniform, normal, Poisson and exponential samplers,
  geometric Brownian motion price increments and a univariate Hawkes point
  process with an exponential kernel.
- **Order book features and targets** (`atelier.features`, `atelier.targets`):
  spread, midprice, weighted midprice, VWAP over a chosen depth, volume
  imbalance, total available volume within a band, update intervals, and the
  sign of the midprice move.
- **Convex learning** (`atelier.models`, `atelier.functions`,
  `atelier.optimizers`, `atelier.metrics`, `atelier.agents`,
  `atelier.topology`, `atelier.mathutils`): a linear model, binary
  cross-entropy with L1, L2 or elastic-net penalties, gradient descent,
  classification metrics, a logistic-regression agent and a row-stochastic
  connections matrix between agents.

All numeric work is done with NumPy.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Generators

Every sampler takes the number of draws and, optionally, a
`numpy.random.Generator`; pass a seeded one to reproduce a run.

```python
import numpy as np

from atelier.probabilistic import Exponential, Poisson, uniform_return
from atelier.brownian import gbm_return
from atelier.hawkes import HawkesProcess

rng = np.random.default_rng(7)

returns = uniform_return(-0.001, 0.001, 10, rng)   # values in [lower, upper)

counts = Poisson(lambda_=3.0).sample(100, rng)
waits = Exponential(lambda_=0.5).sample(100, rng)

# Price increments dS of a geometric Brownian motion started at 100.
increments = gbm_return(100.0, 0.05, 0.2, 1 / 252, 20, rng)

hawkes = HawkesProcess(mu=0.8, alpha=0.4, beta=1.2)
event_times = hawkes.generate_values(0.0, 50, rng)
rate = hawkes.intensity(1.0, event_times)
```

Notes:

- `NormalDistribution(mu, sigma).sample(n)` always draws standard normal
  values; `mu` and `sigma` only describe the process the draws feed.
- `Poisson.fit(data)` sets the rate to the sample mean (zero for no data).
- `UniformDistribution` raises `ValueError` unless its bounds are finite and
  `lower < upper`.

Invalid generator parameters raise `atelier.errors.GeneratorError`:
`gbm_return` for a negative price or volatility, a non-positive time step or
step count; `HawkesProcess` for a negative `mu` or `alpha` or a non-positive
`beta`. `generate_values` also raises it (kind `OUTPUT_TYPE_FAILURE`) when the
intensity is not positive, for example with `mu=0` before any event.

All package errors derive from `atelier.errors.AtelierError`. `LevelError`,
`OrderError` and `GeneratorError` carry a `kind` member from their nested
`Kind` enumeration, whose value is the message; `EventError` and
`SynthetizerError(detail)` are also available.

## Order book features and targets

Features and targets work on any order book object whose `bids` and `asks`
are lists of levels with `price` and `volume` attributes, best level first.
`compute_obts` additionally reads an `orderbook_ts` timestamp.

```python
from atelier.features import FeaturesOutput, compute_features, compute_obts
from atelier.targets import TargetsOutput, compute_targets

matrix = compute_features(
    orderbooks,
    ["spread", "midprice", "w_midprice", "vwap", "imb", "tav"],
    10,        # number of levels per side used by vwap
    1.0,       # relative band around the best prices used by tav
    FeaturesOutput.VALUES,
)

labels = compute_targets(orderbooks, ["return_sign"], TargetsOutput.VALUES)
intervals = compute_obts(orderbooks)
```

Feature values are truncated to 8 decimals. `return_sign` yields `0.0` for the
first order book and then `1.0` where the midprice rose, `0.0` otherwise.

Single features are available as `compute_spread`, `compute_midprice`,
`compute_w_midprice`, `compute_imb`, `compute_vwap(ob, depth)` and
`compute_tav(ob, bps)`, or through `OrderbookFeatures` and `FeatureSelector`
(`OrderbookTargets` and `TargetSelector` for targets). An unknown feature or
target name raises `ValueError` listing the available names
(`OrderbookFeatures.list_features()`, `OrderbookTargets.list_targets()`).
An order book without a bid or an ask level raises `ValueError`.

## Learning

```python
import numpy as np

from atelier.models import LinearModel
from atelier.functions import CrossEntropy, RegType
from atelier.metrics import Metrics
from atelier.optimizers import GradientDescent

rng = np.random.default_rng(0)
model = LinearModel.glorot_uniform(6, "model_00", rng)

logits = model.forward(features)
loss_fn = CrossEntropy("loss_00")
loss = loss_fn.compute_loss(logits, labels)
penalty = loss_fn.regularize(model.weights, RegType.ELASTICNET, [1.9, 0.8])

optimizer = GradientDescent("opt_00", learning_rate=0.01)
optimizer.step(model.weights, model.bias, weight_gradients, bias_gradients)

metrics = Metrics.basic_classification()
results = metrics.compute_all(labels, logits)
print(results["accuracy"], metrics.list_metrics())
```

- `LinearModel.save_model(path)` writes the weights and bias to an `.npz`
  archive; `load_model(path)` reads them back.
- `CrossEntropy.compute_loss` is the mean binary cross-entropy on logits;
  `regularize` takes `[c, lambda]`.
- `GradientDescent.step` updates the arrays in place; `DGD.step` does the same
  for the first agent's weights only.
- `Metrics.basic_classification()` holds `Accuracy` and `ConfusionMatrix`
  (`[[TN, FP], [FN, TP]]`); `Metrics.complete_classification()` holds
  `ClassificationMetrics` (accuracy, precision, recall, specificity, F1 and the
  counts). Each metric keeps a history, read with `get_latest` and
  `get_history` and cleared with `reset_all`.
- `DistributedAgent(features, labels, lambda1, lambda2, eta)` is a
  logistic-regression agent with zero-initialised weights and `forward`,
  `compute_gradient`, `compute_loss`, `compute_bce` and
  `compute_accuracy(p_threshold)`.
- `atelier.mathutils` provides `transform(data, Transformation.STANDARDIZE or
  Transformation.SCALE)`, `empty_matrix(n)` and `Stats.from_data(values)`,
  which returns `None` for fewer than two values.

### Several agents

A topology file describes how agents are connected:

```toml
[[training]]
agents = 3
agent_connections = [
  { from = 0, to = 1, weight = 0.5 },
  { from = 1, to = 2, weight = 0.5 },
  { from = 2, to = 0, weight = 0.5 },
]
```

```python
from atelier.topology import ConnectionsMatrix, UpdateStrategy

topology = ConnectionsMatrix(3).fill("topology.toml")
print(topology.get_weight(0, 1))
print(topology.to_array())
```

Only the first `[[training]]` table is read, and connections naming an agent
outside the matrix are ignored. Rows are normalised to sum to one; an agent
with no outgoing connections keeps all of its weight on itself.
`UpdateStrategy` names the two consensus orders, `COMBINE_THEN_ADAPT` and
`ADAPT_THEN_COMBINE`.

## What the package does not do

- It has no order book type and does not generate synthetic order books; you
  supply the snapshots that features and targets are computed from.
- It does not read experiment templates or datasets from disk, and has no
  command-line tool.
- It provides the pieces for training but no training loop: neither a
  single-model trainer nor a trainer that runs several agents through the
  consensus strategies.