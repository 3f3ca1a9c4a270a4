import pytest

from tests.helpers import clone_params, write_params
from rvb.params import load_params
from rvb.validate import validate_params


def _run_validation(tmp_path, sample_params_dict, mutator):
    data = clone_params(sample_params_dict)
    mutator(data)
    path = write_params(tmp_path, data)
    return validate_params(load_params(path))


def test_sample_params_validate():
    result = validate_params(load_params("sample_params.json"))
    assert result.errors == []
    assert result.is_valid


def test_sample_params_flag_expensive_housing():
    result = validate_params(load_params("sample_params.json"))
    assert any(w.startswith("housing:") and "recommended 30%" in w for w in result.warnings)


@pytest.mark.parametrize(
    ("mutator", "expected_error"),
    [
        (lambda d: d.update({"yearsToAnalyze": -1}), "yearsToAnalyze: must be >= 0"),
        (lambda d: d.update({"loanTermYears": 0}), "loanTermYears: must be > 0"),
        (lambda d: d.update({"housePrice": 0}), "housePrice: must be > 0"),
        (lambda d: d.update({"avgTenancyYears": 0}), "avgTenancyYears: must be > 0"),
        (lambda d: d.update({"downPaymentPercent": 120}), "downPaymentPercent: must be <= 100"),
        (lambda d: d.update({"vacancyRate": -5}), "vacancyRate: must be >= 0"),
        (lambda d: d.update({"initialCash": -1}), "initialCash: must be >= 0"),
        (lambda d: d.update({"monthlyGroceries": -10}), "monthlyGroceries: must be >= 0"),
        (
            lambda d: d.update({"contributionFrequency": "weekly"}),
            "contributionFrequency: 'weekly' is not valid; expected one of [monthly, yearly]",
        ),
    ],
)
def test_invalid_params_report_errors(tmp_path, sample_params_dict, mutator, expected_error):
    result = _run_validation(tmp_path, sample_params_dict, mutator)
    assert expected_error in result.errors
    assert not result.is_valid


def test_unknown_filing_status_is_only_a_warning(tmp_path, sample_params_dict):
    result = _run_validation(tmp_path, sample_params_dict, lambda d: d.update({"filingStatus": "joint"}))
    assert result.is_valid
    assert any(w.startswith("filingStatus: 'joint'") for w in result.warnings)


def test_insufficient_cash_warning(tmp_path, sample_params_dict):
    result = _run_validation(tmp_path, sample_params_dict, lambda d: d.update({"initialCash": 10_000}))
    assert result.is_valid
    assert any(w.startswith("initialCash:") for w in result.warnings)


def test_pmi_warning(tmp_path, sample_params_dict):
    result = _run_validation(tmp_path, sample_params_dict, lambda d: d.update({"downPaymentPercent": 10}))
    assert result.is_valid
    assert any(w.startswith("downPaymentPercent:") and "PMI" in w for w in result.warnings)


def test_long_horizon_warning(tmp_path, sample_params_dict):
    result = _run_validation(tmp_path, sample_params_dict, lambda d: d.update({"yearsToAnalyze": 60}))
    assert result.is_valid
    assert any(w.startswith("yearsToAnalyze:") for w in result.warnings)


def test_affordable_housing_has_no_housing_warning(tmp_path, sample_params_dict):
    result = _run_validation(tmp_path, sample_params_dict, lambda d: d.update({"yearlyIncome": 250_000}))
    assert not any(w.startswith("housing:") for w in result.warnings)
