"""Tests for the weight & balance API endpoint."""

from __future__ import annotations

import json

import pytest


@pytest.fixture
def profile_document(rectangle_points):
    return {
        "id": "ac_n172",
        "tailNumber": "N172SP",
        "makeModel": "Cessna 172S",
        "emptyWeight": {"weightLb": 1500, "momentLbIn": 55000},
        "limits": {"maxRampLb": 2558, "maxTakeoffLb": 2550, "maxLandingLb": 2550},
        "fuel": {"usableGal": 53, "densityLbPerGal": 6.0},
        "stations": [
            {"id": "st_front", "name": "Front seats", "armIn": 37},
            {"id": "st_rear", "name": "Rear seats", "armIn": 73},
            {"id": "st_bag", "name": "Baggage A", "armIn": 95, "maxWeightLb": 120},
            {"id": "st_fuel", "name": "Fuel (usable)", "armIn": 48},
        ],
        "cgEnvelopes": {
            "normal": {
                "points": [
                    {"cgIn": 35, "weightLb": 1500},
                    {"cgIn": 47.3, "weightLb": 1500},
                    {"cgIn": 47.3, "weightLb": 2550},
                    {"cgIn": 41, "weightLb": 2550},
                    {"cgIn": 35, "weightLb": 1950},
                ]
            }
        },
    }


class TestWeightBalanceAPI:
    async def test_compute(self, client, profile_document):
        payload = {
            "profile": profile_document,
            "inputs": {
                "frontSeatsLb": 340,
                "startFuelGal": 30,
                "taxiFuelGal": 1,
                "plannedBurnGal": 10,
            },
        }
        resp = await client.post("/api/weight-balance", json=payload)
        assert resp.status_code == 200
        data = resp.json()

        report = data["report"]
        assert report["ramp"]["result"]["totalWeight"] == pytest.approx(2020.0)
        assert report["ramp"]["result"]["totalMoment"] == pytest.approx(76220.0)
        assert report["fuel"]["takeoff"] == pytest.approx(29.0)
        assert report["fuel"]["landing"] == pytest.approx(19.0)
        assert report["normal"]["valid"] is True
        assert report["utility"]["valid"] is False
        assert report["utility"]["diagnoses"]["ramp"] == "undefined"
        assert report["primaryDiagnoses"]["ramp"] == "inside"
        assert report["primaryDiagnoses"]["landing"] == "inside"

        summary = data["summary"]
        assert summary["rampWeightLb"] == pytest.approx(2020.0)
        assert summary["isWithinEnvelope"] is True
        assert summary["isWithinLimits"] is True

    async def test_compute_migrates_legacy_profile(self, client, profile_document):
        legacy = dict(profile_document)
        legacy["cgEnvelope"] = legacy.pop("cgEnvelopes")["normal"]
        payload = {"profile": legacy, "inputs": {"frontSeatsLb": 340, "startFuelGal": 30}}
        resp = await client.post("/api/weight-balance", json=payload)
        assert resp.status_code == 200
        assert resp.json()["report"]["normal"]["valid"] is True

    async def test_active_category_utility(self, client, profile_document):
        payload = {
            "profile": profile_document,
            "inputs": {"frontSeatsLb": 340, "startFuelGal": 30, "activeCategory": "utility"},
        }
        resp = await client.post("/api/weight-balance", json=payload)
        report = resp.json()["report"]
        assert report["activeCategory"] == "utility"
        assert report["primaryDiagnoses"]["ramp"] == "undefined"
        assert report["hasAnyEnvelope"] is True

    async def test_invalid_profile(self, client):
        payload = {"profile": {"stations": [{"name": "x"}]}, "inputs": {}}
        resp = await client.post("/api/weight-balance", json=payload)
        assert resp.status_code == 422

    async def test_invalid_category(self, client, profile_document):
        payload = {"profile": profile_document, "inputs": {"activeCategory": "aerobatic"}}
        resp = await client.post("/api/weight-balance", json=payload)
        assert resp.status_code == 422

    async def test_non_finite_input_rejected(self, client, profile_document):
        body = json.dumps({"profile": profile_document, "inputs": {"frontSeatsLb": 0}})
        body = body.replace('"frontSeatsLb": 0', '"frontSeatsLb": 1e400')
        resp = await client.post(
            "/api/weight-balance", content=body, headers={"Content-Type": "application/json"}
        )
        assert resp.status_code == 422
