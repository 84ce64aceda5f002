# tests/test_api.py

def test_list_calculators(client):
    r = client.get("/calculators")
    assert r.status_code == 200, r.text
    ids = {c["id"] for c in r.json()}
    assert {"purchase", "dscr", "va-purchase", "affordability"} <= ids


def test_calculator_detail(client):
    r = client.get("/calculators/purchase")
    assert r.status_code == 200, r.text
    data = r.json()
    names = [f["name"] for f in data["inputs"]]
    assert "homePrice" in names
    program = next(f for f in data["inputs"] if f["name"] == "loanProgram")
    assert program["options"]["1"] == "FHA"


def test_unknown_calculator_is_404(client):
    r = client.get("/calculators/nope")
    assert r.status_code == 404
    assert r.json()["detail"] == "Unknown calculator: nope"

    r = client.post("/calculators/nope/calculate", json={"inputs": {}})
    assert r.status_code == 404


def test_calculate_with_string_inputs(client):
    payload = {
        "inputs": {
            "homePrice": "$300,000",
            "downPayment": "60000",
            "interestRate": "7%",
            "loanTerm": 30,
            "propertyTaxRate": "0",
            "insurance": 0,
        }
    }
    r = client.post("/calculators/purchase/calculate", json=payload)
    assert r.status_code == 200, r.text
    data = r.json()
    assert data["inputs"]["homePrice"] == 300_000.0
    pi = next(x for x in data["results"] if x["label"] == "Principal & Interest")
    assert abs(pi["value"] - 1596.73) < 0.01
    assert pi["format"] == "currency"


def test_missing_required_fields_is_400(client):
    r = client.post("/calculators/purchase/calculate", json={"inputs": {"downPayment": 10_000}})
    assert r.status_code == 400
    detail = r.json()["detail"]
    assert "homePrice" in detail["errors"]


def test_down_payment_above_price_is_400(client):
    payload = {"inputs": {"homePrice": 100_000, "downPayment": 150_000}}
    r = client.post("/calculators/purchase/calculate", json=payload)
    assert r.status_code == 400
    assert "downPayment" in r.json()["detail"]["errors"]


def test_export_payload(client):
    payload = {"inputs": {"homePrice": 300_000, "downPayment": 60_000, "hoa": 100}}
    r = client.post("/calculators/purchase/export", json=payload)
    assert r.status_code == 200, r.text
    data = r.json()
    assert data["calculator_id"] == "purchase"
    assert {seg["label"] for seg in data["chart_data"]} >= {"Principal & Interest", "HOA Fees"}
    assert all(res["formatted"] for res in data["results"])


def test_export_with_custom_chart(client):
    payload = {
        "inputs": {"annualIncome": 90_000, "monthlyDebts": 400, "downPayment": 25_000},
        "chart_data": [{"label": "Budget", "value": 2825.0, "color": "#123456"}],
    }
    r = client.post("/calculators/affordability/export", json=payload)
    assert r.status_code == 200, r.text
    assert r.json()["chart_data"] == [{"label": "Budget", "value": 2825.0, "color": "#123456"}]


def test_amortization_schedule(client):
    payload = {
        "principal": 240_000,
        "annual_rate_pct": 7.0,
        "term_years": 30,
        "first_payment_date": "2025-02-01",
        "yearly": True,
    }
    r = client.post("/amortization/schedule", json=payload)
    assert r.status_code == 200, r.text
    data = r.json()
    assert data["actual_term_months"] == 360
    assert len(data["rows"]) == 360
    assert data["rows"][0]["payment_date"] == "2025-02-01"
    assert len(data["yearly"]) == 30
    assert abs(data["monthly_payment"] - 1596.73) < 0.01


def test_amortization_schedule_with_extra(client):
    payload = {"principal": 240_000, "annual_rate_pct": 7.0, "term_years": 30, "extra_payment": 200}
    r = client.post("/amortization/schedule", json=payload)
    assert r.status_code == 200, r.text
    data = r.json()
    assert data["actual_term_months"] < 360
    assert len(data["rows"]) == data["actual_term_months"]
    assert data["yearly"] == []
