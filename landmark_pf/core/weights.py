import numpy as np

from .geometry import measurement_model


def particle_weight(observations, matches, std_landmark, model=None):
    """
    Product of bivariate Gaussian likelihoods of each observation around its matched landmark.

    Returns 1.0 when there are no observations. The product is summed in the log
    domain: far-off particles underflow to 0.0, very confident ones may overflow
    to inf, never to nan.

    Args:
        observations: map-frame observations
        matches: matched landmark per observation
        std_landmark: (std_x, std_y) of the measurement
        model: frozen measurement_model(std_x, std_y), built from std_landmark when omitted
    """
    if len(observations) != len(matches):
        raise ValueError(
            f"{len(observations)} observations but {len(matches)} matches")
    if len(observations) == 0:
        return 1.0
    if model is None:
        model = measurement_model(*std_landmark)

    residuals = np.array([(obs.x - mu.x, obs.y - mu.y) for obs, mu in zip(observations, matches)])
    log_weight = float(np.sum(model.logpdf(residuals)))
    with np.errstate(over='ignore'):
        return float(np.exp(log_weight))
