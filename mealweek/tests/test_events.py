import unittest
from fastapi.testclient import TestClient

from mealweek.api.api_run import app
from mealweek.api.dependencies import get_random_source, get_store
from mealweek.events import web_observers
from mealweek.events.Event_Bus import EventBus, MEAL_PLAN_GENERATED
from mealweek.infra.Store import InMemoryStore
from mealweek.tests.fakes import SequenceRandomSource, recipe_document


class TestEventBus(unittest.TestCase):
    def test_failing_observer_does_not_stop_others(self):
        bus = EventBus()
        seen = []

        def broken(event, payload):
            raise RuntimeError("boom")

        bus.subscribe(MEAL_PLAN_GENERATED, broken)
        bus.subscribe(MEAL_PLAN_GENERATED, lambda event, payload: seen.append(payload))
        with self.assertLogs("mealweek.events.Event_Bus", level="ERROR"):
            bus.publish(MEAL_PLAN_GENERATED, {"version": 1})
        self.assertEqual(seen, [{"version": 1}])

    def test_unsubscribe(self):
        bus = EventBus()
        seen = []
        handler = lambda event, payload: seen.append(event)
        bus.subscribe(MEAL_PLAN_GENERATED, handler)
        bus.unsubscribe(MEAL_PLAN_GENERATED, handler)
        bus.publish(MEAL_PLAN_GENERATED, {})
        self.assertEqual(seen, [])


class TestEventsEndpoint(unittest.TestCase):
    def setUp(self):
        self.store = InMemoryStore({"recipe:1": recipe_document("1", title="Omelette", main="Egg")})
        app.dependency_overrides[get_store] = lambda: self.store
        app.dependency_overrides[get_random_source] = lambda: SequenceRandomSource([0])
        self.addCleanup(app.dependency_overrides.clear)
        web_observers.start()

    def test_plan_changes_show_up_in_event_feed(self):
        with TestClient(app) as client:
            cursor = client.get('/api/events').json()['next_cursor']
            client.post('/api/meal-plan')
            client.patch('/api/meal-plan/shopping-list', json={'itemName': 'carrot', 'acquired': True})
            feed = client.get('/api/events', params={'since': cursor}).json()

        types = [e['type'] for e in feed['events']]
        self.assertEqual(types, ['meal_plan.generated', 'shopping_list.item_toggled'])
        self.assertEqual(feed['events'][1]['name'], 'carrot')
        self.assertTrue(feed['events'][1]['acquired'])
        self.assertEqual(feed['next_cursor'], feed['events'][-1]['id'])
