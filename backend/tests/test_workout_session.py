import asyncio
import unittest
from unittest.mock import MagicMock

from fitcoach.client.plan_model import DayPlan
from fitcoach.client.workout_session import (
    InvalidTransition, Phase, WorkoutItem, WorkoutSession, WorkoutTicker,
)
from tests.helpers import plan_data


def scenario(on_complete=None):
    # warmup empty, main = A (10s) + B (reps), cooldown = C (15s)
    return WorkoutSession(
        warmup=[],
        main=[WorkoutItem("A", 10), WorkoutItem("B", None, reps_or_time="12 reps")],
        cooldown=[WorkoutItem("C", 15)],
        on_complete=on_complete,
    )


class TestWorkoutSession(unittest.TestCase):

    def test_full_sequence(self):
        on_complete = MagicMock()
        session = scenario(on_complete)

        session.start()
        self.assertEqual(session.phase, Phase.MAIN)
        self.assertEqual(session.current_item.name, "A")

        for _ in range(10):
            session.tick()
        self.assertEqual(session.current_item.name, "B")

        # Rep-based items wait for the user
        for _ in range(60):
            session.tick()
        self.assertEqual(session.current_item.name, "B")

        session.skip()
        self.assertEqual(session.phase, Phase.COOLDOWN)
        self.assertEqual(session.current_item.name, "C")

        for _ in range(15):
            session.tick()
        self.assertEqual(session.phase, Phase.COMPLETED)
        on_complete.assert_called_once()

        with self.assertRaises(InvalidTransition):
            session.tick()
        on_complete.assert_called_once()

    def test_skip_acts_like_timer(self):
        session = scenario()
        session.start()
        session.skip()
        self.assertEqual(session.current_item.name, "B")
        self.assertIsNone(session.remaining)

    def test_pause_keeps_remaining_time(self):
        session = scenario()
        session.start()
        for _ in range(3):
            session.tick()
        self.assertEqual(session.remaining, 7)

        session.pause()
        for _ in range(5):
            session.tick()
        self.assertEqual(session.remaining, 7)
        self.assertEqual(session.current_item.name, "A")

        session.resume()
        self.assertEqual(session.remaining, 7)
        session.tick()
        self.assertEqual(session.remaining, 6)

    def test_abort_is_terminal_and_silent(self):
        on_complete = MagicMock()
        session = scenario(on_complete)
        session.start()
        session.pause()
        session.abort()

        self.assertEqual(session.phase, Phase.ABORTED)
        self.assertFalse(session.paused)
        with self.assertRaises(InvalidTransition):
            session.skip()
        on_complete.assert_not_called()

    def test_abort_after_completion(self):
        on_complete = MagicMock()
        session = scenario(on_complete)
        session.start()
        while session.is_active:
            session.skip()
        self.assertEqual(session.phase, Phase.COMPLETED)

        session.abort()
        session.abort()

        self.assertEqual(session.phase, Phase.ABORTED)
        self.assertIsNone(session.current_item)
        on_complete.assert_called_once_with()

    def test_illegal_transitions(self):
        session = scenario()
        with self.assertRaises(InvalidTransition):
            session.tick()
        with self.assertRaises(InvalidTransition):
            session.abort()
        session.start()
        with self.assertRaises(InvalidTransition):
            session.start()

    def test_empty_workout_cannot_start(self):
        with self.assertRaises(InvalidTransition):
            WorkoutSession([], [], []).start()

    def test_from_day_plan(self):
        day = DayPlan.from_raw(plan_data()["fitness_plan_7_days"][0], 0)
        session = WorkoutSession.from_day_plan(day)

        self.assertEqual([i.duration_seconds for i in session.items(Phase.WARMUP)], [30])
        self.assertEqual([i.timed for i in session.items(Phase.MAIN)], [False, True])
        self.assertEqual(session.items(Phase.MAIN)[1].duration_seconds, 45)

        session.start()
        self.assertEqual(session.phase, Phase.WARMUP)


class TestWorkoutTicker(unittest.IsolatedAsyncioTestCase):

    async def test_ticker_runs_to_completion(self):
        done = MagicMock()
        session = WorkoutSession([WorkoutItem("Jog", 2)], [], [WorkoutItem("Stretch", 1)], on_complete=done)
        ticker = WorkoutTicker(session, period=0.001)

        ticker.start()
        await asyncio.wait_for(ticker.wait(), timeout=2)

        self.assertEqual(session.phase, Phase.COMPLETED)
        done.assert_called_once()
        self.assertFalse(ticker.scheduled)

    async def test_pause_stops_schedule_without_reset(self):
        session = WorkoutSession([], [WorkoutItem("Plank", 1000)], [])
        ticker = WorkoutTicker(session, period=0.001)

        ticker.start()
        await asyncio.sleep(0.05)
        ticker.pause()
        frozen = session.remaining
        self.assertLess(frozen, 1000)
        self.assertFalse(ticker.scheduled)

        await asyncio.sleep(0.05)
        self.assertEqual(session.remaining, frozen)

        ticker.resume()
        self.assertTrue(ticker.scheduled)
        self.assertEqual(session.remaining, frozen)
        ticker.abort()
        self.assertEqual(session.phase, Phase.ABORTED)


if __name__ == "__main__":
    unittest.main()
