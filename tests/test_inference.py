import math

import pandas as pd
import pytest
from scipy import stats

import restaurant_satisfaction_analysis as rsa


# ----------------------------
# T-test
# ----------------------------

def test_sex_t_test_matches_welch(survey):
    result = rsa.sex_t_test(survey)
    a = survey.loc[survey["sex"] == 0, "overall"]
    b = survey.loc[survey["sex"] == 1, "overall"]
    expected = stats.ttest_ind(a, b, equal_var=False)

    assert (result["group1"], result["group2"]) == ("0", "1")
    assert result["n1"] + result["n2"] == len(survey)
    assert result["t_stat"] == pytest.approx(expected.statistic)
    assert result["p_value"] == pytest.approx(expected.pvalue)
    assert result["df"] == pytest.approx(expected.df)


def test_sex_t_test_interval_centred_on_difference(survey):
    result = rsa.sex_t_test(survey)
    diff = result["mean1"] - result["mean2"]
    assert result["ci_low"] < diff < result["ci_high"]
    assert (result["ci_low"] + result["ci_high"]) / 2 == pytest.approx(diff)


def test_sex_t_test_single_group_is_nan(survey):
    result = rsa.sex_t_test(survey[survey["sex"] == 0])
    assert result["group2"] is None
    assert math.isnan(result["t_stat"])
    assert math.isnan(result["p_value"])


def test_sex_t_test_three_levels_is_nan(survey_df):
    df = survey_df.copy()
    df.loc[df.index[:30], "sex"] = 2
    result = rsa.sex_t_test(rsa.preprocess(df))
    assert result["group1"] is None
    assert math.isnan(result["t_stat"])
    assert math.isnan(result["p_value"])
    assert math.isnan(result["ci_low"])


# ----------------------------
# ANOVA + Tukey
# ----------------------------

def test_store_anova_matches_oneway(survey):
    result, table = rsa.store_anova(survey)
    groups = [g["overall"].values for _, g in survey.groupby("store", observed=True)]
    expected = stats.f_oneway(*groups)

    assert result["F"] == pytest.approx(expected.statistic)
    assert result["p_value"] < 0.001
    assert result["df_between"] == 3
    assert result["df_within"] == len(survey) - 4
    assert "Residual" in table.index


def test_store_anova_ignores_unused_levels(survey):
    subset = survey[survey["store"].isin([1, 2])]
    result, _ = rsa.store_anova(subset)
    assert result["df_between"] == 1


def test_store_anova_single_store_is_nan(survey):
    result, table = rsa.store_anova(survey[survey["store"] == 1])
    assert math.isnan(result["F"])
    assert table.empty


def test_store_tukey_pairs(survey):
    tukey = rsa.store_tukey(survey, alpha=0.05)
    assert list(tukey.columns) == rsa.TUKEY_COLUMNS
    assert len(tukey) == 6
    extreme = tukey[(tukey["group1"] == 1) & (tukey["group2"] == 4)].iloc[0]
    assert bool(extreme["reject"])
    assert extreme["meandiff"] == pytest.approx(2.4, abs=0.5)


def test_store_tukey_single_store_empty(survey):
    assert rsa.store_tukey(survey[survey["store"] == 2]).empty


def test_store_tukey_orders_numeric_stores():
    df = rsa.preprocess(pd.DataFrame({
        "sex": [0, 1] * 6,
        "store": [2, 2, 2, 2, 10, 10, 10, 10, 3, 3, 3, 3],
        "food_bev": [4.0] * 12,
        "service": [4.0] * 12,
        "money": [4.0] * 12,
        "interior": [4.0] * 12,
        "overall": [3.0, 3.5, 4.0, 3.2, 6.0, 6.5, 6.1, 5.8, 4.5, 4.9, 5.1, 4.7],
    }))
    tukey = rsa.store_tukey(df)
    pairs = list(zip(tukey["group1"], tukey["group2"]))
    assert pairs == [(2, 3), (2, 10), (3, 10)]


# ----------------------------
# Regression
# ----------------------------

def test_driver_regression_recovers_drivers(survey):
    model = rsa.driver_regression(survey)
    coefs = rsa.coefficient_table(model).set_index("term")

    assert list(coefs.index) == rsa.DRIVER_COLS
    assert coefs.loc["food_bev", "estimate"] == pytest.approx(0.5, abs=0.1)
    assert coefs.loc["service", "estimate"] == pytest.approx(0.3, abs=0.1)
    assert (coefs["conf_low"] < coefs["estimate"]).all()
    assert (coefs["estimate"] < coefs["conf_high"]).all()
    assert rsa.strongest_driver(coefs.reset_index()) == "food_bev"


def test_coefficient_table_with_intercept(survey):
    model = rsa.driver_regression(survey)
    coefs = rsa.coefficient_table(model, include_intercept=True)
    assert list(coefs.columns) == rsa.COEF_COLUMNS
    assert coefs["term"].iloc[0] == "Intercept"
    assert len(coefs) == 5


def test_coefficient_table_alpha_widens_interval(survey):
    model = rsa.driver_regression(survey)
    narrow = rsa.coefficient_table(model, alpha=0.10)
    wide = rsa.coefficient_table(model, alpha=0.01)
    assert ((wide["conf_high"] - wide["conf_low"]) > (narrow["conf_high"] - narrow["conf_low"])).all()


def test_driver_regression_drops_incomplete_rows(survey):
    df = survey.copy()
    df.loc[df.index[:10], "money"] = float("nan")
    model = rsa.driver_regression(df)
    assert int(model.nobs) == len(df) - 10


def test_driver_regression_too_few_rows(survey):
    assert rsa.driver_regression(survey.head(4)) is None
    assert rsa.coefficient_table(None).empty
    assert rsa.strongest_driver(pd.DataFrame(columns=rsa.COEF_COLUMNS)) is None
