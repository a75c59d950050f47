"""
Tests for the calculator API endpoints.
"""

import pytest


class TestHealthCheck:
    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestCatalogApi:
    """Test catalog, favorites and ratings endpoints."""

    def test_search(self, client):
        response = client.get("/api/catalog", params={"category": "health"})
        assert response.status_code == 200
        assert {item["id"] for item in response.json()} == {
            "bmi",
            "calorie-burn",
            "daily-calories",
            "one-rep-max",
            "pregnancy",
        }

    def test_toggle_favorite(self, client, favorites_store):
        response = client.post("/api/favorites/loan")
        assert response.status_code == 200
        assert response.json()["favorite"] is True
        assert favorites_store.list() == ["loan"]

        favorites = client.get("/api/favorites").json()
        assert [item["id"] for item in favorites] == ["loan"]

        assert client.post("/api/favorites/loan").json()["favorite"] is False

    def test_unknown_calculator(self, client):
        assert client.post("/api/favorites/astrology").status_code == 404

    def test_rating(self, client):
        response = client.post("/api/ratings/gpa", json={"stars": 5})
        assert response.status_code == 200
        assert response.json()["rating"] == 5

    def test_rating_out_of_range(self, client):
        assert client.post("/api/ratings/gpa", json={"stars": 9}).status_code == 422


class TestLoansApi:
    """Test loan, mortgage and payoff endpoints."""

    def test_loan(self, client):
        response = client.post(
            "/api/loans/loan",
            json={"principal": 25000, "annual_rate": 6.5, "term": 60, "term_unit": "months"},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["months"] == 60
        assert data["monthly_payment"] == pytest.approx(489.15, abs=0.02)
        assert len(data["schedule"]) == 60
        assert len(data["yearly"]) == 5
        assert data["schedule"][-1]["remaining_balance"] == 0

    def test_loan_without_schedule(self, client):
        response = client.post(
            "/api/loans/loan",
            json={"principal": 10000, "annual_rate": 5, "term": 3, "include_schedule": False},
        )
        assert response.json()["schedule"] == []

    def test_invalid_loan_is_400(self, client):
        response = client.post("/api/loans/loan", json={"principal": -1, "annual_rate": 5, "term": 3})
        assert response.status_code == 400
        assert response.json()["error"] == "InvalidInput"

    def test_mortgage(self, client):
        response = client.post(
            "/api/loans/mortgage",
            json={"home_price": 400000, "down_payment": 80000, "annual_rate": 6.5},
        )
        assert response.status_code == 200
        assert response.json()["loan_amount"] == 320000

    def test_payoff(self, client):
        response = client.post(
            "/api/loans/payoff",
            json={
                "debts": [
                    {"name": "Card", "balance": 1000, "annual_rate": 20, "minimum_payment": 50},
                    {"name": "Store", "balance": 500, "annual_rate": 10, "minimum_payment": 25},
                ],
                "extra_payment": 100,
            },
        )
        assert response.status_code == 200
        data = response.json()
        assert data["avalanche"]["payoff_order"] == ["Card", "Store"]
        assert data["snowball"]["payoff_order"] == ["Store", "Card"]
        assert data["interest_saved"] >= 0

    def test_payoff_non_convergent(self, client):
        response = client.post(
            "/api/loans/payoff",
            json={"debts": [{"name": "Card", "balance": 10000, "annual_rate": 24, "minimum_payment": 100}]},
        )
        assert response.status_code == 400
        assert response.json()["error"] == "NonConvergent"

    def test_lease_vs_buy(self, client):
        response = client.post(
            "/api/loans/lease-vs-buy",
            json={
                "car_price": 30000,
                "down_payment": 5000,
                "loan_rate": 6.5,
                "loan_months": 60,
                "buy_maintenance": 150,
                "monthly_lease": 399,
                "lease_down_payment": 2000,
                "lease_months": 36,
                "lease_maintenance": 50,
            },
        )
        assert response.status_code == 200
        data = response.json()
        assert data["buying"]["monthly_payment"] == pytest.approx(489.15, abs=0.02)
        assert data["leasing"]["total_cost"] == pytest.approx(18164)
        assert data["recommendation"] == "lease"

    def test_rent_vs_buy(self, client):
        response = client.post(
            "/api/loans/rent-vs-buy",
            json={"home_price": 400000, "down_payment": 80000, "mortgage_rate": 7, "monthly_rent": 2500},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["years"] == 5
        assert data["renting"]["total_cost"] == pytest.approx(159274.07, abs=0.01)

    def test_rent_vs_buy_down_payment_above_price(self, client):
        response = client.post(
            "/api/loans/rent-vs-buy",
            json={"home_price": 100000, "down_payment": 200000, "mortgage_rate": 7, "monthly_rent": 900},
        )
        assert response.status_code == 400
        assert response.json()["error"] == "InvalidInput"


class TestGrowthApi:
    """Test growth, inflation and retirement endpoints."""

    def test_compound(self, client):
        response = client.post(
            "/api/growth/compound",
            json={"principal": 1000, "annual_rate": 10, "years": 2, "frequency": 1},
        )
        assert response.status_code == 200
        assert response.json()["total_amount"] == pytest.approx(1210)

    def test_inflation(self, client):
        data = client.post("/api/growth/inflation", json={"amount": 100, "rate": 3, "years": 1}).json()
        assert data["future_purchasing_power"] == pytest.approx(97.087, abs=0.001)
        assert data["cumulative_inflation"] == pytest.approx(3)

    def test_investment_returns(self, client):
        data = client.post(
            "/api/growth/investment-returns",
            json={"initial_investment": 10000, "current_value": 10500, "time_held": 1},
        ).json()
        assert data["rating"] == "Below Average"

    def test_investment_returns_overflow_is_400(self, client):
        response = client.post(
            "/api/growth/investment-returns",
            json={"initial_investment": 100, "current_value": 1000, "time_held": 1, "time_unit": "days"},
        )
        assert response.status_code == 400
        assert response.json()["error"] == "OutOfRange"

    def test_drawdown(self, client):
        data = client.post(
            "/api/growth/drawdown",
            json={"savings": 100000, "annual_return": 0, "withdrawal": 10000, "mode": "fixed"},
        ).json()
        assert data["years_lasted"] == 10
        assert data["depleted"] is True


class TestConversionsApi:
    """Test unit and currency endpoints."""

    def test_units(self, client):
        response = client.post(
            "/api/conversions/units",
            json={"category": "temperature", "value": 100, "from_unit": "C", "to_unit": "F"},
        )
        assert response.status_code == 200
        assert response.json()["result"] == pytest.approx(212)

    def test_list_units(self, client):
        data = client.get("/api/conversions/units").json()
        assert "mi" in data["length"]
        assert data["temperature"] == ["C", "F", "K"]

    def test_unknown_unit_is_400(self, client):
        response = client.post(
            "/api/conversions/units",
            json={"category": "length", "value": 1, "from_unit": "m", "to_unit": "cubit"},
        )
        assert response.status_code == 400
        assert response.json()["error"] == "UnknownUnit"

    def test_currency(self, client):
        data = client.post(
            "/api/conversions/currency",
            json={"amount": 100, "from_currency": "usd", "to_currency": "eur"},
        ).json()
        assert data["converted"] == pytest.approx(92.59, abs=0.01)
        assert data["to_currency"] == "EUR"
        assert data["rates_version"] == "2024-01-illustrative"

    def test_currencies(self, client):
        data = client.get("/api/conversions/currencies").json()
        assert data["reference"] == "USD"
        assert "JPY" in data["currencies"]


class TestHealthApi:
    """Test health and fitness endpoints."""

    def test_bmi_metric(self, client):
        data = client.post("/api/health/bmi", json={"weight_kg": 70, "height_m": 1.75}).json()
        assert data["bmi"] == pytest.approx(22.86, abs=0.01)
        assert data["category"] == "Normal"

    def test_bmi_imperial(self, client):
        data = client.post("/api/health/bmi", json={"pounds": 154, "feet": 5, "inches": 9}).json()
        assert data["category"] == "Normal"

    def test_bmi_missing_height(self, client):
        response = client.post("/api/health/bmi", json={"weight_kg": 70})
        assert response.status_code == 400

    def test_one_rep_max(self, client):
        data = client.post(
            "/api/health/one-rep-max", json={"weight": 100, "reps": 10, "formula": "brzycki"}
        ).json()
        assert data["one_rep_max"] == pytest.approx(133.33, abs=0.01)
        assert set(data["all_formulas"]) == {"epley", "brzycki", "lander", "oconner"}
        assert data["training_percentages"][0]["percentage"] == 95

    def test_one_rep_max_too_many_reps(self, client):
        response = client.post("/api/health/one-rep-max", json={"weight": 100, "reps": 21})
        assert response.status_code == 400
        assert response.json()["error"] == "OutOfRange"

    def test_calorie_burn(self, client):
        data = client.post(
            "/api/health/calorie-burn",
            json={"weight_kg": 70, "duration_minutes": 60, "activity": "running"},
        ).json()
        assert data["calories"] == pytest.approx(560)

    def test_daily_calories(self, client):
        data = client.post(
            "/api/health/daily-calories",
            json={"weight_kg": 80, "height_cm": 180, "age": 30, "sex": "male"},
        ).json()
        assert data["bmr"] == pytest.approx(1780)

    def test_pregnancy(self, client):
        data = client.post(
            "/api/health/pregnancy", json={"last_period": "2024-01-01", "today": "2024-03-01"}
        ).json()
        assert data["due_date"] == "2024-10-07"
        assert data["trimester"] == 1


class TestDatesApi:
    """Test date endpoints."""

    def test_days_between(self, client):
        data = client.post(
            "/api/dates/days-between", json={"start": "2024-01-01", "end": "2024-03-01"}
        ).json()
        assert data["days"] == 60

    def test_add(self, client):
        data = client.post("/api/dates/add", json={"start": "2024-01-31", "months": 1}).json()
        assert data["date"] == "2024-02-29"

    def test_age(self, client):
        data = client.post(
            "/api/dates/age", json={"birth_date": "1990-05-15", "on_date": "2024-03-01"}
        ).json()
        assert data["years"] == 33

    def test_time_zones(self, client):
        data = client.post(
            "/api/dates/time-zones",
            json={"instant": "2024-01-15T12:00:00Z", "zones": ["America/New_York", "Asia/Kolkata"]},
        ).json()
        assert [zone["utc_offset"] for zone in data] == ["-05:00", "+05:30"]

    def test_naive_instant_is_400(self, client):
        response = client.post(
            "/api/dates/time-zones", json={"instant": "2024-01-15T12:00:00", "zones": ["UTC"]}
        )
        assert response.status_code == 400


class TestMoneyApi:
    """Test percentage, tax, tip, budget, paycheck and GPA endpoints."""

    def test_percentage_change(self, client):
        data = client.post("/api/money/percentage", json={"operation": "change", "a": 100, "b": 120}).json()
        assert data["result"] == pytest.approx(20)

    def test_percentage_change_from_zero(self, client):
        response = client.post("/api/money/percentage", json={"operation": "change", "a": 0, "b": 100})
        assert response.status_code == 400
        assert response.json()["error"] == "DivisionByZero"

    def test_sales_tax_remove(self, client):
        data = client.post(
            "/api/money/sales-tax", json={"amount": 108.25, "rate": 8.25, "direction": "remove"}
        ).json()
        assert data["pre_tax"] == pytest.approx(100)

    def test_tip(self, client):
        data = client.post("/api/money/tip", json={"bill": 100, "tip_percent": 20, "people": 4}).json()
        assert data["per_person"] == pytest.approx(30)

    def test_budget(self, client):
        data = client.post("/api/money/budget", json={"monthly_income": 5000}).json()
        assert data["split"]["needs"] == 2500
        assert data["categories"]["needs"][0]["category"] == "Housing"

    def test_paycheck(self, client):
        data = client.post(
            "/api/money/paycheck", json={"annual_salary": 52000, "frequency": "weekly"}
        ).json()
        assert data["net_pay"] == pytest.approx(653.5)

    def test_gpa(self, client):
        data = client.post(
            "/api/money/gpa",
            json={
                "courses": [
                    {"name": "Math", "grade": "A", "credits": 3, "honors": True},
                    {"name": "History", "grade": "B", "credits": 3},
                ],
                "scale": "5.0",
            },
        ).json()
        assert data["gpa"] == pytest.approx(4.0)


class TestSavingsApi:
    """Test emergency fund, net worth and commute endpoints."""

    def test_emergency_fund(self, client):
        data = client.post(
            "/api/money/emergency-fund",
            json={"monthly_expenses": 3000, "current_savings": 3000, "monthly_savings": 500},
        ).json()
        assert data["months_to_goal"] == 30

    def test_net_worth(self, client):
        data = client.post(
            "/api/money/net-worth",
            json={
                "assets": [{"name": "Cash", "value": 20000, "category": "cash"}],
                "liabilities": [{"name": "Card", "value": 5000, "category": "debt"}],
            },
        ).json()
        assert data["net_worth"] == 15000
        assert data["rating"] == "Building Wealth"

    def test_commute(self, client):
        data = client.post("/api/money/commute", json={"daily_miles": 30, "mpg": 30}).json()
        assert data["gas"]["yearly_cost"] == pytest.approx(910)
        assert data["yearly_savings"] > 0


class TestTravelApi:
    """Test EV charging, fuel economy and trip time endpoints."""

    def test_ev_charging(self, client):
        response = client.post(
            "/api/travel/ev-charging",
            json={"battery_kwh": 75, "daily_miles": 40, "miles_per_kwh": 4, "charger": "dc_fast"},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["electricity_rate"] == 0.35
        assert data["kwh_per_charge"] == pytest.approx(50)

    def test_ev_charging_unknown_charger(self, client):
        response = client.post(
            "/api/travel/ev-charging",
            json={"battery_kwh": 75, "daily_miles": 40, "charger": "solar"},
        )
        assert response.status_code == 422

    def test_fuel_economy(self, client):
        data = client.post(
            "/api/travel/fuel-economy", json={"miles": 300, "gallons": 10, "fuel_cost": 35}
        ).json()
        assert data["mpg"] == pytest.approx(30)
        assert data["rating"] == "Good"

    def test_trip_time(self, client):
        data = client.post(
            "/api/travel/trip-time",
            json={"distance": 150, "speed": 60, "stops": 2, "departure": "2024-05-01T08:00:00"},
        ).json()
        assert (data["hours"], data["minutes"]) == (3, 0)
        assert data["arrival"] == "2024-05-01T11:00:00"

    def test_trip_time_zero_speed_is_400(self, client):
        response = client.post("/api/travel/trip-time", json={"distance": 150, "speed": 0})
        assert response.status_code == 400
        assert response.json()["error"] == "InvalidInput"
