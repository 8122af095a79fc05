import numpy as np
import pandas as pd
from pathlib import Path

n_counties = 8
dates = pd.date_range("2020-03-01", "2021-12-31", freq="D")

rng = np.random.default_rng(0)
counties = [f"County {i}" for i in range(n_counties)]

# Running totals, like most public COVID feeds publish them
daily = rng.poisson(lam=rng.uniform(2, 40, size=(n_counties, 1)), size=(n_counties, len(dates)))
cumulative = daily.cumsum(axis=1)

wide = pd.DataFrame(cumulative, columns=dates.strftime("%Y-%m-%d"))
wide.insert(0, "County", counties)

Path("data").mkdir(exist_ok=True)
wide.to_csv("data/mock_cumulative.csv", index=False)
print("wrote data/mock_cumulative.csv", wide.shape)
