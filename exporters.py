# exporters.py
import json
from dataclasses import asdict

import numpy as np

from curves import curve_frame


def export_curve(records) -> tuple[str, bytes]:
    df = curve_frame(records)
    return "lifecycle_curve.csv", df.to_csv(index=False).encode()


def _json_default(o):
    # Handle numpy arrays & scalars cleanly for JSON
    if isinstance(o, np.ndarray):
        return o.tolist()
    if isinstance(o, (np.floating, np.integer, np.bool_)):
        return o.item()
    # Let json raise for anything else unexpected
    raise TypeError(f"Object of type {o.__class__.__name__} is not JSON serializable")


def export_params(params, result=None) -> tuple[str, bytes]:
    """
    Export the parameter vector (ratios and slider percentages) and, when
    given, the lifecycle aggregate it produced.
    """
    blob = {"params": asdict(params), "sliders": params.as_percent()}
    if result is not None:
        blob["aggregate"] = asdict(result)
    return "params.json", json.dumps(blob, indent=2, default=_json_default).encode()
