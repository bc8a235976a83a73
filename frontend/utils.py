#file: frontend/utils.py

import pandas as pd

from frontend.status import get_status_from_index


def sub_indices_frame(reading) :
    """Convert the sub-indices of a reading into a DataFrame, one row per pollutant."""
    rows = [
        {
            "pollutant" : sub_index.pollutant_name,
            "index" : sub_index.pollutant_index,
            "label" : get_status_from_index(sub_index.pollutant_index).label,
            "color" : get_status_from_index(sub_index.pollutant_index).color,
            "concentration" : sub_index.concentration,
        }
        for sub_index in reading.sub_indices
    ]
    return pd.DataFrame(rows, columns = ["pollutant", "index", "label", "color", "concentration"])
