"""Tests for the simulation driver and the text reports built from its results."""

import pytest

from pagesim.engine_base import LoadResult
from pagesim.engines import FIFOEngine, LRUEngine
from pagesim.report import ReportBuilder, ReportConfig
from pagesim.simulator import Simulator, StepRecord
from pagesim.trials import DEFAULT_CAPACITIES, DEFAULT_REFERENCES, parse_int_list


class TestSimulator:
    def test_records_one_step_per_reference(self) -> None:
        result = Simulator([1, 2, 1, 3]).run(FIFOEngine(2))
        assert [step.index for step in result.steps] == [0, 1, 2, 3]
        assert [step.page for step in result.steps] == [1, 2, 1, 3]
        assert result.steps[-1] == StepRecord(3, 3, LoadResult.miss(1), (2, 3))

    def test_aggregates(self) -> None:
        result = Simulator([1, 2, 1, 3]).run(LRUEngine(2))
        assert result.policy == "LRU"
        assert result.capacity == 2
        assert result.total_references == 4
        assert (result.faults, result.hits, result.evictions) == (3, 1, 1)
        assert result.fault_ratio == pytest.approx(0.75)
        assert result.hit_ratio == pytest.approx(0.25)

    def test_empty_stream(self) -> None:
        result = Simulator([]).run(FIFOEngine(3))
        assert result.steps == []
        assert result.fault_ratio == 0.0

    def test_reference_list_is_copied(self) -> None:
        refs = [1, 2]
        simulator = Simulator(refs)
        refs.append(3)
        assert simulator.run(FIFOEngine(3)).total_references == 2

    def test_default_data_set(self) -> None:
        simulator = Simulator(DEFAULT_REFERENCES)
        fifo = simulator.run(FIFOEngine(3))
        lru = simulator.run(LRUEngine(3))
        assert fifo.faults == 20
        assert lru.faults == 19
        assert fifo.fault_ratio == pytest.approx(20 / 33)

    @pytest.mark.parametrize("capacity", DEFAULT_CAPACITIES)
    def test_reruns_are_identical(self, capacity) -> None:
        simulator = Simulator(DEFAULT_REFERENCES)
        for engine_cls in (FIFOEngine, LRUEngine):
            first = simulator.run(engine_cls(capacity))
            second = simulator.run(engine_cls(capacity))
            assert first.load_results() == second.load_results()


class TestReportBuilder:
    def _builder(self, refs, trace_capacity=3):
        config = ReportConfig(
            references=refs, capacities=[3], policies=["FIFO", "LRU"], trace_capacity=trace_capacity
        )
        return ReportBuilder(config)

    def test_trial_table_rows(self) -> None:
        refs = [1, 1, 0, 3, 5]
        result = Simulator(refs).run(FIFOEngine(3))
        lines = self._builder(refs).build_trial_table(result).splitlines()
        assert lines[0] == "Data Set: FIFO, RSS = 3"
        assert "New Page" in lines[1] and "Current Page List" in lines[1]
        cells = [[c.strip() for c in line.strip("|").split("|")] for line in lines[3:]]
        assert cells[0] == ["Trial 0", "1", "empty", "1"]
        assert cells[1] == ["Trial 1", "1", "none", "1"]
        assert cells[4] == ["Trial 4", "5", "1", "0, 3, 5"]

    def test_summary_table(self) -> None:
        simulator = Simulator(DEFAULT_REFERENCES)
        results = [simulator.run(FIFOEngine(3)), simulator.run(LRUEngine(3))]
        lines = self._builder(DEFAULT_REFERENCES).build_summary_table(results).splitlines()
        assert "# Faults using FIFO" in lines[0]
        assert "LRU Page Fault Frequency" in lines[0]
        cells = [c.strip() for c in lines[2].strip("|").split("|")]
        assert cells == ["3", "20", "0.606061", "19", "0.575758"]

    def test_summary_table_empty(self) -> None:
        assert self._builder([]).build_summary_table([]) == "(No data)"

    def test_report_only_traces_selected_capacity(self) -> None:
        refs = [1, 2, 3, 4]
        simulator = Simulator(refs)
        results = [simulator.run(FIFOEngine(c)) for c in (2, 3)]
        report = self._builder(refs, trace_capacity=3).build_report(results)
        assert "Data Set: FIFO, RSS = 3" in report
        assert "Data Set: FIFO, RSS = 2" not in report
        assert "[Summary]" in report


class TestParseIntList:
    def test_commas_and_spaces(self) -> None:
        assert parse_int_list("1,2 3, 4") == [1, 2, 3, 4]

    def test_rejects_garbage(self) -> None:
        with pytest.raises(ValueError, match="'x'"):
            parse_int_list("1,x")

    def test_rejects_empty(self) -> None:
        with pytest.raises(ValueError):
            parse_int_list(" , ")
