import tempfile
import unittest
from pathlib import Path
from fastapi.testclient import TestClient
from mealcart.api.api_run import app
from mealcart.api.deps import get_data_dir
from mealcart.events import web_observers

WEEK = '2024-01-15'


class ApiTestCase(unittest.TestCase):

    @classmethod
    def setUpClass(cls):
        cls.client = TestClient(app)
        web_observers.start()

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        data_dir = Path(self._tmp.name)
        app.dependency_overrides[get_data_dir] = lambda: data_dir

    def tearDown(self):
        app.dependency_overrides.clear()
        self._tmp.cleanup()

    def add_recipe(self, name, servings, ingredients):
        resp = self.client.post('/api/recipes', json={
            'name': name, 'servings': servings, 'ingredients': ingredients,
        })
        self.assertEqual(resp.status_code, 201)
        return resp.json()['id']

    def plan_flour_week(self):
        recipe_a = self.add_recipe('Recipe A', 4, [
            {'item': 'flour', 'quantity': '2', 'unit': 'cup', 'category': 'pantry'},
        ])
        recipe_b = self.add_recipe('Recipe B', 2, [
            {'item': 'flour', 'quantity': '1', 'unit': 'cups', 'category': 'pantry'},
            {'item': 'egg', 'quantity': '1', 'category': 'dairy'},
        ])
        self.client.put(f'/api/meal-plan/{WEEK}/monday', json={'recipe_id': recipe_a})
        self.client.put(f'/api/meal-plan/{WEEK}/tuesday', json={'recipe_id': recipe_b})
        self.client.post('/api/inventory', json={'item': 'flour', 'status': 'out', 'typical_price': 0.5})
        self.client.post('/api/inventory', json={'item': 'egg', 'status': 'have'})


class TestRecipesAPI(ApiTestCase):

    def test_crud(self):
        recipe_id = self.add_recipe('Soup', 4, [{'item': 'leek', 'quantity': '2'}])
        resp = self.client.get(f'/api/recipes/{recipe_id}')
        self.assertEqual(resp.json()['ingredients'][0]['item'], 'leek')

        resp = self.client.put(f'/api/recipes/{recipe_id}', json={'servings': 6})
        self.assertEqual(resp.json()['servings'], 6)
        self.assertEqual(resp.json()['name'], 'Soup')

        resp = self.client.put(f'/api/recipes/{recipe_id}/ingredients', json={'ingredients': [{'item': 'onion'}]})
        self.assertEqual([i['item'] for i in resp.json()['ingredients']], ['onion'])

        self.assertEqual(self.client.delete(f'/api/recipes/{recipe_id}').status_code, 200)
        self.assertEqual(self.client.get(f'/api/recipes/{recipe_id}').status_code, 404)
        self.assertEqual(self.client.get('/api/recipes').json()['count'], 0)

    def test_invalid_recipe_rejected(self):
        resp = self.client.post('/api/recipes', json={'name': '', 'servings': 4})
        self.assertEqual(resp.status_code, 422)
        resp = self.client.post('/api/recipes', json={'name': 'Soup', 'servings': 0})
        self.assertEqual(resp.status_code, 422)
        resp = self.client.post('/api/recipes', json={
            'name': 'Soup', 'servings': 4, 'ingredients': [{'item': 'salt', 'quantity': '1' + '0' * 400 + '/3'}],
        })
        self.assertEqual(resp.status_code, 422)


class TestInventoryAPI(ApiTestCase):

    def test_duplicate_and_grouping(self):
        self.assertEqual(self.client.post('/api/inventory', json={'item': 'Milk', 'status': 'low',
                                                                  'category': 'dairy'}).status_code, 201)
        self.assertEqual(self.client.post('/api/inventory', json={'item': 'milk'}).status_code, 400)
        data = self.client.get('/api/inventory').json()
        self.assertEqual(data['count'], 1)
        self.assertEqual(data['by_category']['dairy'][0]['item'], 'Milk')
        self.assertEqual(self.client.post('/api/inventory', json={'item': 'x', 'status': 'lots'}).status_code, 422)


class TestMealPlanAPI(ApiTestCase):

    def test_week_view_snaps_to_monday(self):
        recipe_id = self.add_recipe('Soup', 4, [])
        resp = self.client.put('/api/meal-plan/2024-01-17/Wednesday', json={'recipe_id': recipe_id})
        self.assertEqual(resp.status_code, 200)
        data = self.client.get('/api/meal-plan/2024-01-21').json()
        self.assertEqual(data['week_start'], WEEK)
        self.assertEqual(len(data['days']), 7)
        self.assertEqual(data['days'][2]['recipe_name'], 'Soup')

    def test_unknown_recipe_day_and_date(self):
        self.assertEqual(self.client.put(f'/api/meal-plan/{WEEK}/monday', json={'recipe_id': 'nope'}).status_code, 404)
        recipe_id = self.add_recipe('Soup', 4, [])
        self.assertEqual(self.client.put(f'/api/meal-plan/{WEEK}/someday', json={'recipe_id': recipe_id}).status_code, 400)
        self.assertEqual(self.client.get('/api/meal-plan/not-a-date').status_code, 400)

    def test_deleted_recipe_flagged_missing(self):
        recipe_id = self.add_recipe('Soup', 4, [])
        self.client.put(f'/api/meal-plan/{WEEK}/monday', json={'recipe_id': recipe_id})
        self.client.delete(f'/api/recipes/{recipe_id}')
        monday = self.client.get(f'/api/meal-plan/{WEEK}').json()['days'][0]
        self.assertTrue(monday['missing_recipe'])


class TestShoppingListAPI(ApiTestCase):

    def test_generate_without_meals_is_conflict(self):
        resp = self.client.post(f'/api/shopping-list/{WEEK}/generate')
        self.assertEqual(resp.status_code, 409)
        self.assertEqual(resp.json()['detail']['error'], 'no_meals_planned')

    def test_generate_flour_week(self):
        self.plan_flour_week()
        resp = self.client.post(f'/api/shopping-list/{WEEK}/generate')
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual(data['count'], 1)
        item = data['items'][0]
        self.assertEqual((item['item'], item['quantity'], item['unit']), ('flour', 2.5, 'cup'))
        self.assertEqual(item['estimated_price'], 1.25)
        self.assertEqual(data['estimated_total'], 1.25)
        self.assertEqual(data['target_servings'], 2.5)

    def test_everything_in_stock_gives_empty_list(self):
        self.plan_flour_week()
        self.client.put('/api/inventory/flour', json={'item': 'flour', 'status': 'have'})
        resp = self.client.post(f'/api/shopping-list/{WEEK}/generate')
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()['items'], [])

    def test_manual_items_survive_regeneration(self):
        self.plan_flour_week()
        resp = self.client.post(f'/api/shopping-list/{WEEK}/items', json={'item': 'Paper towels', 'quantity': 1})
        self.assertEqual(resp.status_code, 201)
        self.assertTrue(resp.json()['manual'])

        items = self.client.post(f'/api/shopping-list/{WEEK}/generate').json()['items']
        self.assertEqual([i['item'] for i in items], ['Paper towels', 'flour'])

        items = self.client.post(f'/api/shopping-list/{WEEK}/generate',
                                 json={'preserve_manual': False}).json()['items']
        self.assertEqual([i['item'] for i in items], ['flour'])

    def test_target_servings_override(self):
        self.plan_flour_week()
        data = self.client.post(f'/api/shopping-list/{WEEK}/generate', json={'target_servings': 4}).json()
        # 2 * 4/4 + 1 * 4/2
        self.assertEqual(data['items'][0]['quantity'], 4.0)

    def test_huge_quantity_does_not_break_the_week(self):
        recipe_id = self.add_recipe('Salt block', 1, [{'item': 'salt', 'quantity': '1e308', 'unit': 'g'}])
        self.client.put(f'/api/meal-plan/{WEEK}/monday', json={'recipe_id': recipe_id})
        resp = self.client.post(f'/api/shopping-list/{WEEK}/generate')
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()['items'][0]['quantity'], 0.0)
        self.assertEqual(self.client.get(f'/api/shopping-list/{WEEK}').status_code, 200)

    def test_toggle_checked(self):
        self.plan_flour_week()
        self.client.post(f'/api/shopping-list/{WEEK}/generate')
        resp = self.client.patch(f'/api/shopping-list/{WEEK}/items/FLOUR')
        self.assertTrue(resp.json()['checked'])
        resp = self.client.patch(f'/api/shopping-list/{WEEK}/items/flour', json={'checked': True})
        self.assertTrue(resp.json()['checked'])
        resp = self.client.patch(f'/api/shopping-list/{WEEK}/items/flour')
        self.assertFalse(resp.json()['checked'])
        self.assertEqual(self.client.patch(f'/api/shopping-list/{WEEK}/items/butter').status_code, 404)

    def test_exports(self):
        self.plan_flour_week()
        self.client.post(f'/api/shopping-list/{WEEK}/generate')
        pdf = self.client.get(f'/api/shopping-list/{WEEK}/pdf')
        self.assertEqual(pdf.headers['content-type'], 'application/pdf')
        self.assertTrue(pdf.content.startswith(b'%PDF'))
        csv = self.client.get(f'/api/shopping-list/{WEEK}/csv')
        self.assertIn('2024-01-15,flour,2.5,cup,pantry,1.25,FALSE,FALSE', csv.text)


class TestBudgetAPI(ApiTestCase):

    def test_budget_compares_with_last_week(self):
        self.plan_flour_week()
        self.client.post(f'/api/shopping-list/{WEEK}/generate')
        resp = self.client.post('/api/price-history', json={'prices': [
            {'item': 'flour', 'price': 2.0, 'store': 'Corner Shop', 'date': '2024-01-09'},
            {'item': 'milk', 'price': 1.5, 'date': '2024-01-14'},
            {'item': 'eggs', 'price': 3.0, 'date': '2024-01-15'},
        ]})
        self.assertEqual(resp.status_code, 201)
        self.assertEqual(resp.json()['total'], 6.5)

        data = self.client.get(f'/api/budget/{WEEK}').json()
        self.assertEqual(data['estimated_total'], 1.25)
        self.assertEqual(data['last_week_actual'], 3.5)
        self.assertEqual(data['difference'], -2.25)
        self.assertEqual(data['recent_history'][0]['item'], 'eggs')

        history = self.client.get('/api/price-history', params={'limit': 2}).json()
        self.assertEqual(history['count'], 3)
        self.assertEqual(len(history['entries']), 2)

    def test_empty_price_log_rejected(self):
        self.assertEqual(self.client.post('/api/price-history', json={'prices': []}).status_code, 422)

    def test_history_limit_must_be_positive(self):
        for limit in (0, -1):
            with self.subTest(limit=limit):
                resp = self.client.get('/api/price-history', params={'limit': limit})
                self.assertEqual(resp.status_code, 422)


class TestMetaAndEventsAPI(ApiTestCase):

    def test_meta(self):
        data = self.client.get('/api/meta').json()
        self.assertEqual(data['days'][0], 'monday')
        self.assertIn('pantry', data['categories'])
        self.assertEqual(data['statuses'], ['have', 'low', 'out'])

    def test_writes_publish_events(self):
        cursor = self.client.get('/api/events').json()['next_cursor']
        self.plan_flour_week()
        self.client.post(f'/api/shopping-list/{WEEK}/generate')
        types = [e['type'] for e in self.client.get('/api/events', params={'since': cursor}).json()['events']]
        self.assertIn('recipes.updated', types)
        self.assertIn('meal_plan.updated', types)
        self.assertIn('inventory.updated', types)
        self.assertEqual(types[-1], 'shopping_list.generated')


if __name__ == '__main__':
    unittest.main()
