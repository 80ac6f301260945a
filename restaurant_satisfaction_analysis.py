from __future__ import annotations
import argparse
import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import pandas as pd
import numpy as np

# Visualization
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import seaborn as sns
from pandas.plotting import scatter_matrix

# Stats
from scipy import stats
import statsmodels.api as sm
import statsmodels.formula.api as smf
from statsmodels.stats.multicomp import pairwise_tukeyhsd

# PDF
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.platypus import SimpleDocTemplate, Paragraph, Spacer, Table, TableStyle, Image
from reportlab.lib import colors

logger = logging.getLogger("restaurant_satisfaction")

# ----------------------------
# Paths & constants
# ----------------------------

INPUT_CSV = Path("data/inputs/restaurant_satisfaction.csv")

OUTPUT_DIR = Path("data/outputs")
FIG_DIRNAME = "figs"
PDF_FILENAME = "report_restaurant_satisfaction.pdf"

# Column names
SEX_COL = "sex"
STORE_COL = "store"
FOOD_COL = "food_bev"
SERVICE_COL = "service"
MONEY_COL = "money"
INTERIOR_COL = "interior"
OVERALL_COL = "overall"

CATEGORICAL_COLS = [SEX_COL, STORE_COL]
DRIVER_COLS = [FOOD_COL, SERVICE_COL, MONEY_COL, INTERIOR_COL]
NUMERIC_COLS = DRIVER_COLS + [OVERALL_COL]
REQUIRED_COLS = CATEGORICAL_COLS + NUMERIC_COLS

HIST_BINWIDTH = 0.5
TUKEY_PREVIEW_ROWS = 6
TUKEY_COLUMNS = ["group1", "group2", "meandiff", "p-adj", "lower", "upper", "reject"]
COEF_COLUMNS = ["term", "estimate", "std_error", "statistic", "p_value", "conf_low", "conf_high"]

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


# ----------------------------
# Configuration & metadata
# ----------------------------

@dataclass
class AnalysisConfig:
    input_csv: Path = INPUT_CSV
    output_dir: Path = OUTPUT_DIR
    alpha: float = 0.05
    build_pdf: bool = True

    def __post_init__(self) -> None:
        self.input_csv = Path(self.input_csv)
        self.output_dir = Path(self.output_dir)
        if not 0.0 < self.alpha < 1.0:
            raise ValueError(f"alpha must be between 0 and 1 (got {self.alpha})")

    @property
    def fig_dir(self) -> Path:
        return self.output_dir / FIG_DIRNAME

    @property
    def pdf_path(self) -> Path:
        return self.output_dir / PDF_FILENAME


@dataclass
class Meta:
    title: str = "Restaurant Customer Satisfaction — Report"
    source: str = ""
    toolchain: str = "Python 3 (pandas, numpy, matplotlib, seaborn, scipy, statsmodels, reportlab)"


# ----------------------------
# Helpers
# ----------------------------

def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
    )


def ensure_output_dirs(config: AnalysisConfig) -> None:
    config.output_dir.mkdir(parents=True, exist_ok=True)
    config.fig_dir.mkdir(parents=True, exist_ok=True)


def to_numeric(series: pd.Series) -> pd.Series:
    """Coerce possibly string-encoded numerics to float; invalid -> NaN."""
    return pd.to_numeric(series, errors="coerce")


def has_variation(series: pd.Series) -> bool:
    """Check if a numeric series has at least two distinct finite values."""
    s = pd.to_numeric(series, errors="coerce").dropna()
    return s.nunique(dropna=True) >= 2


def fmt_stat(value, spec: str = ".3f") -> str:
    """Format a statistic for the report; NaN/None -> 'NA'."""
    if value is None:
        return "NA"
    try:
        if np.isnan(value):
            return "NA"
    except TypeError:
        return str(value)
    return format(value, spec)


def print_section(title: str) -> None:
    print("\n" + "=" * 60)
    print(title)
    print("=" * 60)


def half_step_bins(values: pd.Series, width: float = HIST_BINWIDTH) -> np.ndarray:
    """Bin edges of the given width, with bins centred on multiples of `width`."""
    lo = np.floor(values.min() / width) * width - width / 2
    hi = np.ceil(values.max() / width) * width + width / 2
    return np.arange(lo, hi + width / 2, width)


def save_figure(fig, path: Path) -> Path:
    fig.savefig(path, bbox_inches="tight", dpi=150)
    plt.close(fig)
    logger.info(f"Figure written: {path}")
    return path


# ----------------------------
# 1) Loading & preprocessing
# ----------------------------

def load_data(csv_path: Path) -> pd.DataFrame:
    csv_path = Path(csv_path)
    if not csv_path.exists():
        raise FileNotFoundError(f"CSV not found at {csv_path}")
    df = pd.read_csv(csv_path)
    missing = [c for c in REQUIRED_COLS if c not in df.columns]
    if missing:
        raise ValueError(f"CSV at {csv_path} is missing required columns: {', '.join(missing)}")
    logger.info(f"Loaded {csv_path}: {df.shape[0]} rows, {df.shape[1]} cols")
    return df


def count_missing(df: pd.DataFrame) -> int:
    return int(df.isna().sum().sum())


def missing_by_column(df: pd.DataFrame) -> pd.Series:
    return df.isna().sum()


def preprocess(df: pd.DataFrame) -> pd.DataFrame:
    """Categorical sex/store, numeric ratings. Rows are never dropped here."""
    out = df.copy()
    for col in NUMERIC_COLS:
        before = int(out[col].isna().sum())
        out[col] = to_numeric(out[col])
        coerced = int(out[col].isna().sum()) - before
        if coerced:
            logger.warning(f"{col}: {coerced} non-numeric value(s) coerced to NaN")
    for col in CATEGORICAL_COLS:
        out[col] = out[col].astype("category")
    return out


def describe_structure(df: pd.DataFrame, n_preview: int = 5) -> pd.DataFrame:
    rows = []
    for col in df.columns:
        preview = ", ".join(str(v) for v in df[col].head(n_preview).tolist())
        rows.append({
            "column": col,
            "dtype": str(df[col].dtype),
            "non_null": int(df[col].notna().sum()),
            "preview": preview,
        })
    return pd.DataFrame(rows, columns=["column", "dtype", "non_null", "preview"])


def summary_table(df: pd.DataFrame) -> pd.DataFrame:
    return df.describe(include="all").T


# ----------------------------
# 2) Descriptive statistics by store
# ----------------------------

def store_summary(df: pd.DataFrame) -> pd.DataFrame:
    grouped = df.groupby(STORE_COL, observed=True).agg(
        Count=(OVERALL_COL, "size"),
        Avg_Overall=(OVERALL_COL, "mean"),
        Avg_Food=(FOOD_COL, "mean"),
        Avg_Service=(SERVICE_COL, "mean"),
        SD_Overall=(OVERALL_COL, "std"),
    )
    return grouped.sort_values("Avg_Overall", ascending=False)


# ----------------------------
# 3) Visualizations
# ----------------------------

def plot_overall_histogram(df: pd.DataFrame, fig_dir: Path) -> Optional[Path]:
    overall = df[OVERALL_COL].dropna()
    if overall.empty:
        return None

    fig, ax = plt.subplots(figsize=(8, 5))
    ax.hist(overall, bins=half_step_bins(overall), color="steelblue", edgecolor="white")
    ax.axvline(overall.mean(), color="red", linestyle="--")
    fig.suptitle("Distribution of Overall Satisfaction Scores")
    ax.set_title("Red dashed line indicates the mean score", fontsize=10)
    ax.set_xlabel("Overall Score")
    ax.set_ylabel("Frequency")
    return save_figure(fig, fig_dir / "overall_histogram.png")


def correlation_matrix(df: pd.DataFrame) -> pd.DataFrame:
    return df[NUMERIC_COLS].corr(method="pearson")


def plot_correlation_heatmap(corr: pd.DataFrame, fig_dir: Path) -> Optional[Path]:
    if corr.isna().all().all():
        return None

    # upper triangle incl. diagonal
    mask = np.tril(np.ones_like(corr, dtype=bool), k=-1)

    fig, ax = plt.subplots(figsize=(7, 6))
    sns.heatmap(corr, mask=mask, annot=True, fmt=".2f", cmap="RdBu",
                linewidths=0.5, ax=ax, vmin=-1, vmax=1, center=0)
    ax.set_xticklabels(ax.get_xticklabels(), rotation=45, ha="right")
    ax.set_title("Correlation Heatmap: What drives Overall Satisfaction?", pad=15)
    return save_figure(fig, fig_dir / "correlation_heatmap.png")


def plot_overall_by_store(df: pd.DataFrame, fig_dir: Path) -> Optional[Path]:
    tmp = df[[STORE_COL, OVERALL_COL]].dropna()
    groups = [(store, g[OVERALL_COL].values) for store, g in tmp.groupby(STORE_COL, observed=True)]
    groups = [(store, vals) for store, vals in groups if len(vals) > 0]
    if not groups:
        return None

    fig, ax = plt.subplots(figsize=(8, 5))
    box = ax.boxplot([vals for _, vals in groups], patch_artist=True)
    palette = plt.get_cmap("tab10")
    for i, patch in enumerate(box["boxes"]):
        patch.set_facecolor(palette(i % 10))
        patch.set_alpha(0.7)
    ax.set_xticks(range(1, len(groups) + 1), [str(store) for store, _ in groups])
    ax.set_title("Overall Satisfaction by Store")
    ax.set_xlabel("Store Location")
    ax.set_ylabel("Satisfaction Score")
    return save_figure(fig, fig_dir / "overall_by_store_boxplot.png")


def plot_pairs(df: pd.DataFrame, fig_dir: Path) -> Optional[Path]:
    tmp = df[NUMERIC_COLS].dropna()
    if len(tmp) < 2:
        return None

    axes = scatter_matrix(tmp, figsize=(10, 10), diagonal="hist", alpha=0.4)
    fig = axes[0, 0].get_figure()
    fig.suptitle("Pairwise relationships between ratings")
    return save_figure(fig, fig_dir / "pair_plot.png")


def plot_coefficients(coefs: pd.DataFrame, fig_dir: Path) -> Optional[Path]:
    if coefs.empty:
        return None

    ordered = coefs.sort_values("estimate").reset_index(drop=True)
    y = np.arange(len(ordered))
    xerr = np.vstack([
        ordered["estimate"] - ordered["conf_low"],
        ordered["conf_high"] - ordered["estimate"],
    ])

    fig, ax = plt.subplots(figsize=(8, 5))
    ax.errorbar(ordered["estimate"], y, xerr=xerr, fmt="none", ecolor="black", capsize=4)
    ax.scatter(ordered["estimate"], y, s=60, color="darkred", zorder=3)
    ax.set_yticks(y)
    ax.set_yticklabels(ordered["term"])
    fig.suptitle("Key Drivers of Customer Satisfaction")
    ax.set_title("Higher estimate = Stronger impact on Overall Score", fontsize=10)
    ax.set_xlabel("Coefficient Estimate")
    ax.set_ylabel("Variable")
    return save_figure(fig, fig_dir / "driver_coefficients.png")


# ----------------------------
# 4) T-test: sex vs overall (Welch)
# ----------------------------

def sex_t_test(df: pd.DataFrame, confidence_level: float = 0.95) -> Dict[str, object]:
    """
    Welch two-sample t-test of overall satisfaction between the two sex groups.
    The mean difference and its confidence interval are first level minus second level.
    """
    tmp = df[[SEX_COL, OVERALL_COL]].dropna()
    samples = [(level, g[OVERALL_COL]) for level, g in tmp.groupby(SEX_COL, observed=True)]
    samples = [(level, s) for level, s in samples if not s.empty]

    result: Dict[str, object] = {
        "group1": None, "group2": None,
        "mean1": float("nan"), "mean2": float("nan"),
        "n1": 0, "n2": 0,
        "t_stat": float("nan"), "df": float("nan"), "p_value": float("nan"),
        "ci_low": float("nan"), "ci_high": float("nan"),
        "confidence_level": confidence_level,
    }
    if len(samples) != 2:
        logger.warning(f"t-test needs exactly two {SEX_COL} groups, found {len(samples)}")
        return result

    (g1, a), (g2, b) = samples
    result.update({
        "group1": str(g1), "group2": str(g2),
        "mean1": float(a.mean()), "mean2": float(b.mean()),
        "n1": int(a.size), "n2": int(b.size),
    })
    if a.size < 2 or b.size < 2:
        return result

    res = stats.ttest_ind(a, b, equal_var=False)
    ci = res.confidence_interval(confidence_level=confidence_level)
    result.update({
        "t_stat": float(res.statistic),
        "df": float(res.df),
        "p_value": float(res.pvalue),
        "ci_low": float(ci.low),
        "ci_high": float(ci.high),
    })
    return result


# ----------------------------
# 5) ANOVA + Tukey HSD: store vs overall
# ----------------------------

def store_anova(df: pd.DataFrame) -> Tuple[Dict[str, float], pd.DataFrame]:
    tmp = df[[STORE_COL, OVERALL_COL]].dropna().copy()
    # plain labels so unused categorical levels don't enter the design matrix
    tmp[STORE_COL] = tmp[STORE_COL].astype(str)
    anova_result = {"F": float("nan"), "p_value": float("nan"),
                    "df_between": float("nan"), "df_within": float("nan"),
                    "n": int(tmp.shape[0])}
    anova_table = pd.DataFrame(columns=["sum_sq", "df", "F", "PR(>F)"])

    if tmp[STORE_COL].nunique() < 2 or not has_variation(tmp[OVERALL_COL]):
        logger.warning("ANOVA skipped: fewer than two stores or no variation in overall scores")
        return anova_result, anova_table

    model = smf.ols(f"{OVERALL_COL} ~ C({STORE_COL})", data=tmp).fit()
    anova_table = sm.stats.anova_lm(model, typ=2)
    anova_result.update({
        "F": float(anova_table["F"].iloc[0]),
        "p_value": float(anova_table["PR(>F)"].iloc[0]),
        "df_between": float(anova_table["df"].iloc[0]),
        "df_within": float(anova_table["df"].iloc[1]),
    })
    return anova_result, anova_table


def store_tukey(df: pd.DataFrame, alpha: float = 0.05) -> pd.DataFrame:
    tmp = df[[STORE_COL, OVERALL_COL]].dropna()
    if tmp[STORE_COL].nunique() < 2:
        return pd.DataFrame(columns=TUKEY_COLUMNS)

    # native label values keep numeric store ids in numeric order
    tukey = pairwise_tukeyhsd(endog=tmp[OVERALL_COL], groups=tmp[STORE_COL].to_numpy(), alpha=alpha)
    table = tukey.summary().data
    return pd.DataFrame(data=table[1:], columns=table[0])


# ----------------------------
# 6) Driver regression
# ----------------------------

def driver_regression(df: pd.DataFrame):
    """OLS of overall satisfaction on the four drivers (listwise deletion)."""
    tmp = df[NUMERIC_COLS].dropna()
    formula = f"{OVERALL_COL} ~ " + " + ".join(DRIVER_COLS)
    if len(tmp) <= len(DRIVER_COLS) + 1:
        logger.warning(f"Regression skipped: only {len(tmp)} complete rows")
        return None
    return smf.ols(formula, data=tmp).fit()


def coefficient_table(model, alpha: float = 0.05, include_intercept: bool = False) -> pd.DataFrame:
    if model is None:
        return pd.DataFrame(columns=COEF_COLUMNS)

    ci = model.conf_int(alpha=alpha)
    coefs = pd.DataFrame({
        "term": model.params.index,
        "estimate": model.params.values,
        "std_error": model.bse.values,
        "statistic": model.tvalues.values,
        "p_value": model.pvalues.values,
        "conf_low": ci.iloc[:, 0].values,
        "conf_high": ci.iloc[:, 1].values,
    })
    if not include_intercept:
        coefs = coefs[coefs["term"] != "Intercept"]
    return coefs.reset_index(drop=True)


def strongest_driver(coefs: pd.DataFrame) -> Optional[str]:
    if coefs.empty:
        return None
    return str(coefs.loc[coefs["estimate"].idxmax(), "term"])


# ----------------------------
# Outputs
# ----------------------------

def write_tables(results: Dict[str, object], output_dir: Path) -> Dict[str, Path]:
    tables = {
        "store_summary": results["store_summary"],
        "correlation_matrix": results["correlation"],
        "anova_store": results["anova_table"],
        "tukey_store": results["tukey"],
        "regression_coefficients": results["coefficients"],
    }
    written = {}
    for name, table in tables.items():
        path = Path(output_dir) / f"{name}.csv"
        keep_index = name in ("store_summary", "correlation_matrix", "anova_store")
        table.to_csv(path, index=keep_index)
        written[name] = path
    logger.info(f"Tables written to {output_dir}")
    return written


def _table(rows: List[list]) -> Table:
    tbl = Table(rows)
    tbl.setStyle(TableStyle([
        ('BACKGROUND', (0,0), (-1,0), colors.lightgrey),
        ('GRID', (0,0), (-1,-1), 0.25, colors.black)
    ]))
    return tbl


def build_pdf(meta: Meta, results: Dict[str, object], pdf_path: Path) -> Path:
    doc = SimpleDocTemplate(str(pdf_path), pagesize=A4)
    styles = getSampleStyleSheet()
    figs = results["figures"]
    story = []

    # Header
    story.append(Paragraph(meta.title, styles['Title']))
    story.append(Spacer(1, 12))
    story.append(Paragraph(f"Source: {meta.source}<br/>Toolchain: {meta.toolchain}", styles['Normal']))

    # Data quality
    story.append(Spacer(1, 12))
    story.append(Paragraph("1) Data quality", styles['Heading2']))
    story.append(Paragraph(
        f"Rows: {results['n_rows']} | Missing cells: {results['n_missing']}", styles['Normal'])
    )

    # Store summary
    story.append(Spacer(1, 12))
    story.append(Paragraph("2) Summary by store", styles['Heading2']))
    summary = results["store_summary"]
    if not summary.empty:
        rows = [["Store", "Count", "Avg overall", "Avg food", "Avg service", "SD overall"]] + [
            [str(store), str(int(row["Count"])), fmt_stat(row["Avg_Overall"], ".2f"),
             fmt_stat(row["Avg_Food"], ".2f"), fmt_stat(row["Avg_Service"], ".2f"),
             fmt_stat(row["SD_Overall"], ".2f")]
            for store, row in summary.iterrows()
        ]
        story.append(_table(rows))

    # Figures
    story.append(Spacer(1, 12))
    story.append(Paragraph("3) Exploratory plots", styles['Heading2']))
    for key in ("histogram", "heatmap", "boxplot", "pairs"):
        if figs.get(key) is not None:
            story.append(Image(str(figs[key]), width=420, height=300))
            story.append(Spacer(1, 6))

    # T-test
    tt = results["t_test"]
    story.append(Spacer(1, 12))
    story.append(Paragraph("4) Overall satisfaction by sex (Welch t-test)", styles['Heading2']))
    story.append(Paragraph(
        f"{SEX_COL}={tt['group1']}: mean = {fmt_stat(tt['mean1'], '.2f')} (n={tt['n1']}), "
        f"{SEX_COL}={tt['group2']}: mean = {fmt_stat(tt['mean2'], '.2f')} (n={tt['n2']}). "
        f"t = {fmt_stat(tt['t_stat'])}, df = {fmt_stat(tt['df'], '.1f')}, p = {fmt_stat(tt['p_value'], '.3g')}, "
        f"{round(tt['confidence_level'] * 100)}% CI of difference = "
        f"[{fmt_stat(tt['ci_low'])}, {fmt_stat(tt['ci_high'])}].", styles['Normal'])
    )

    # ANOVA + Tukey
    an = results["anova"]
    story.append(Spacer(1, 12))
    story.append(Paragraph("5) Store differences: ANOVA and Tukey HSD", styles['Heading2']))
    story.append(Paragraph(
        f"ANOVA: F({fmt_stat(an['df_between'], '.0f')}, {fmt_stat(an['df_within'], '.0f')}) = {fmt_stat(an['F'])}, "
        f"p = {fmt_stat(an['p_value'], '.3g')}, N = {an['n']}.", styles['Normal'])
    )
    if not np.isnan(an["p_value"]):
        verdict = "significant" if an["p_value"] < results["alpha"] else "not significant"
        story.append(Paragraph(f"The store effect is {verdict} at alpha = {results['alpha']}.", styles['Italic']))
    tukey = results["tukey"]
    if not tukey.empty:
        story.append(_table([list(tukey.columns)] + tukey.values.tolist()))

    # Regression
    story.append(Spacer(1, 12))
    story.append(Paragraph("6) Driver analysis (multiple linear regression)", styles['Heading2']))
    model = results["model"]
    if model is not None:
        coef_rows = [["Variable", "Estimate", "Std. error", "t", "p-value", "CI low", "CI high"]] + [
            [row["term"], f"{row['estimate']:.3f}", f"{row['std_error']:.3f}", f"{row['statistic']:.2f}",
             f"{row['p_value']:.3g}", f"{row['conf_low']:.3f}", f"{row['conf_high']:.3f}"]
            for _, row in coefficient_table(model, results["alpha"], include_intercept=True).iterrows()
        ]
        story.append(_table(coef_rows))
        story.append(Paragraph(
            f"R² = {model.rsquared:.3f}, adj. R² = {model.rsquared_adj:.3f}, "
            f"F = {fmt_stat(model.fvalue)}, p = {fmt_stat(model.f_pvalue, '.3g')}, N = {int(model.nobs)}. "
            f"Strongest driver: {results['strongest_driver']}.", styles['Normal'])
        )
        if figs.get("coefficients") is not None:
            story.append(Image(str(figs["coefficients"]), width=420, height=260))
    else:
        story.append(Paragraph("Regression skipped: not enough complete rows.", styles['Italic']))

    doc.build(story)
    logger.info(f"Report written: {pdf_path}")
    return pdf_path


# ----------------------------
# Pipeline
# ----------------------------

def run_analysis(config: AnalysisConfig, meta: Optional[Meta] = None) -> Dict[str, object]:
    ensure_output_dirs(config)
    fig_dir = config.fig_dir

    # --- data ---
    raw = load_data(config.input_csv)
    n_missing = count_missing(raw)
    print_section("Data quality")
    print(f"Missing values (total): {n_missing}")
    if n_missing:
        logger.warning(f"{n_missing} missing value(s) in input")
        print(missing_by_column(raw).to_string())

    df = preprocess(raw)
    print_section("Structure")
    print(describe_structure(df).to_string(index=False))
    print_section("Summary of all variables")
    print(summary_table(df).to_string())

    # --- descriptives ---
    summary = store_summary(df)
    print_section("Summary by store")
    print(summary.to_string())

    # --- EDA plots ---
    corr = correlation_matrix(df)
    figures = {
        "histogram": plot_overall_histogram(df, fig_dir),
        "heatmap": plot_correlation_heatmap(corr, fig_dir),
        "boxplot": plot_overall_by_store(df, fig_dir),
        "pairs": plot_pairs(df, fig_dir),
    }

    # --- hypothesis tests ---
    t_test = sex_t_test(df, confidence_level=1 - config.alpha)
    print_section(f"T-test ({SEX_COL} vs {OVERALL_COL})")
    for key, value in t_test.items():
        print(f"  {key:18s}: {value}")

    anova, anova_table = store_anova(df)
    print_section("ANOVA (store differences)")
    print(anova_table.to_string())

    tukey = store_tukey(df, alpha=config.alpha)
    print_section("Tukey HSD (pairwise store comparison)")
    print(tukey.head(TUKEY_PREVIEW_ROWS).to_string(index=False))

    # --- regression ---
    model = driver_regression(df)
    coefs = coefficient_table(model, alpha=config.alpha)
    figures["coefficients"] = plot_coefficients(coefs, fig_dir)
    print_section("Multiple linear regression")
    if model is not None:
        print(model.summary())

    results = {
        "n_rows": int(df.shape[0]),
        "n_missing": n_missing,
        "alpha": config.alpha,
        "store_summary": summary,
        "correlation": corr,
        "t_test": t_test,
        "anova": anova,
        "anova_table": anova_table,
        "tukey": tukey,
        "model": model,
        "coefficients": coefs,
        "strongest_driver": strongest_driver(coefs),
        "figures": figures,
    }
    results["tables"] = write_tables(results, config.output_dir)

    results["pdf"] = None
    if config.build_pdf:
        meta = meta or Meta(source=str(config.input_csv))
        results["pdf"] = build_pdf(meta, results, config.pdf_path)
    return results


# ----------------------------
# Main
# ----------------------------

def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Exploratory and inferential analysis of a restaurant satisfaction survey.")
    p.add_argument("--input-csv", type=Path, default=INPUT_CSV, help="Survey CSV (sex, store, food_bev, service, money, interior, overall)")
    p.add_argument("--output-dir", type=Path, default=OUTPUT_DIR, help="Directory for tables, figures and the PDF report")
    p.add_argument("--alpha", type=float, default=0.05, help="Significance level for tests and confidence intervals")
    p.add_argument("--no-pdf", action="store_true", help="Skip building the PDF report")
    p.add_argument("--log-level", type=str, default=os.environ.get("LOG_LEVEL", "INFO"), help="Logging level")
    return p.parse_args(argv)


def main(argv=None) -> None:
    args = parse_args(argv)
    configure_logging(args.log_level)
    try:
        config = AnalysisConfig(
            input_csv=args.input_csv,
            output_dir=args.output_dir,
            alpha=args.alpha,
            build_pdf=not args.no_pdf,
        )
        results = run_analysis(config)
    except (FileNotFoundError, ValueError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(2)

    if results["pdf"] is not None:
        print(f"✅ Report generated at {results['pdf']}")
    else:
        print(f"✅ Outputs written to {config.output_dir}")


if __name__ == "__main__":
    main()
