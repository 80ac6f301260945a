from pathlib import Path

import numpy as np
import pandas as pd
import pytest

import restaurant_satisfaction_analysis as rsa

STORE_EFFECTS = {1: 0.0, 2: 0.8, 3: 1.6, 4: 2.4}


def make_survey(n: int = 400, seed: int = 7) -> pd.DataFrame:
    rng = np.random.default_rng(seed)
    store = rng.choice(list(STORE_EFFECTS), size=n)
    df = pd.DataFrame({
        "sex": rng.integers(0, 2, size=n),
        "store": store,
        "food_bev": rng.integers(1, 8, size=n).astype(float),
        "service": rng.integers(1, 8, size=n).astype(float),
        "money": rng.integers(1, 8, size=n).astype(float),
        "interior": rng.integers(1, 8, size=n).astype(float),
    })
    df["overall"] = (
        0.5 * df["food_bev"]
        + 0.3 * df["service"]
        + 0.1 * df["money"]
        + 0.05 * df["interior"]
        + pd.Series(store).map(STORE_EFFECTS).values
        + rng.normal(0, 0.3, size=n)
    )
    return df


@pytest.fixture
def survey_df() -> pd.DataFrame:
    return make_survey()


@pytest.fixture
def survey(survey_df) -> pd.DataFrame:
    return rsa.preprocess(survey_df)


@pytest.fixture
def survey_csv(tmp_path, survey_df) -> Path:
    path = tmp_path / "restaurant_satisfaction.csv"
    survey_df.to_csv(path, index=False)
    return path
