"""
Tests for the roll web API.
"""

import pytest
from rollexpr.core.config import Config
from rollexpr.web.server import create_app


@pytest.fixture
def client(clean_env):
    """Flask test client with a small repetition limit."""
    clean_env.setenv('ROLLEXPR_MAX_TIMES', '5')
    app = create_app(Config())
    app.config['TESTING'] = True
    return app.test_client()


class TestRollGet:
    """Test GET /api/roll."""

    def test_roll(self, client):
        """Test a single roll."""
        response = client.get('/api/roll', query_string={'notation': 'd12 + 52'})
        assert response.status_code == 200

        data = response.get_json()
        assert data['success'] is True
        assert data['notation'] == 'd12 + 52'
        assert 53 <= data['total'] <= 64
        assert data['totals'] == [data['total']]
        assert data['min'] == 53
        assert data['max'] == 64

    def test_canonical_notation(self, client):
        """Test that defaults are made explicit in the response."""
        response = client.get('/api/roll', query_string={'notation': '  3d'})
        assert response.get_json()['notation'] == '3d6'

    def test_seed_and_times(self, client):
        """Test repeatable rolls through the query string."""
        query = {'notation': '10d100', 'seed': '3', 'times': '4'}
        first = client.get('/api/roll', query_string=query).get_json()
        second = client.get('/api/roll', query_string=query).get_json()
        assert len(first['totals']) == 4
        assert first['totals'] == second['totals']

    def test_missing_notation(self, client):
        """Test that notation is required."""
        response = client.get('/api/roll')
        assert response.status_code == 400
        assert response.get_json()['error_code'] == 'invalid_input'

    def test_non_integer_times(self, client):
        """Test that times must be an integer."""
        response = client.get('/api/roll', query_string={'notation': 'd6', 'times': 'many'})
        assert response.status_code == 400
        assert response.get_json()['error_code'] == 'invalid_input'


class TestRollPost:
    """Test POST /api/roll."""

    def test_roll(self, client):
        """Test rolling with a JSON body."""
        response = client.post('/api/roll', json={
            'notation': '3d12 - 8 + 10d8',
            'times': 3,
            'seed': 42
        })
        assert response.status_code == 200

        data = response.get_json()
        assert data['notation'] == '3d12 - 8 + 10d8'
        assert len(data['totals']) == 3
        assert all(5 <= total <= 108 for total in data['totals'])

    def test_parse_error(self, client):
        """Test that parse failures carry their error code."""
        response = client.post('/api/roll', json={'notation': 'd6 +'})
        assert response.status_code == 400

        data = response.get_json()
        assert data['success'] is False
        assert data['error'] == 'Missing operand'
        assert data['error_code'] == 'missing_operand'

    def test_invalid_roll_definition(self, client):
        """Test input that does not start with an operand."""
        response = client.post('/api/roll', json={'notation': ''})
        assert response.status_code == 400
        assert response.get_json()['error_code'] == 'invalid_roll_definition'

    def test_schema_violation(self, client):
        """Test that unknown fields and wrong types are rejected."""
        response = client.post('/api/roll', json={'notation': 6})
        assert response.status_code == 400
        assert response.get_json()['error_code'] == 'invalid_input'

        response = client.post('/api/roll', json={'notation': 'd6', 'explode': True})
        assert response.status_code == 400

    def test_times_limits(self, client):
        """Test lower and configured upper bounds on times."""
        assert client.post('/api/roll', json={'notation': 'd6', 'times': 0}).status_code == 400
        assert client.post('/api/roll', json={'notation': 'd6', 'times': 6}).status_code == 400
        assert client.post('/api/roll', json={'notation': 'd6', 'times': 5}).status_code == 200

    def test_dice_limit(self, clean_env):
        """Test that notations rolling too many dice are refused."""
        clean_env.setenv('ROLLEXPR_MAX_DICE', '20')
        app = create_app(Config())
        app.config['TESTING'] = True
        client = app.test_client()

        response = client.post('/api/roll', json={'notation': '10d6 + 11d6'})
        assert response.status_code == 400
        assert response.get_json()['error_code'] == 'invalid_input'
        assert client.post('/api/roll', json={'notation': '20d6'}).status_code == 200

    def test_huge_dice_count_refused(self, client):
        """Test that the default limit stops oversized requests."""
        response = client.get('/api/roll', query_string={'notation': '99999999d6'})
        assert response.status_code == 400

    def test_body_must_be_json(self, client):
        """Test that a non-JSON body is rejected."""
        response = client.post('/api/roll', data='d6', content_type='text/plain')
        assert response.status_code == 400
        assert response.get_json()['error_code'] == 'invalid_input'


class TestHealth:
    """Test GET /api/health."""

    def test_health(self, client):
        """Test liveness endpoint."""
        response = client.get('/api/health')
        assert response.status_code == 200
        assert response.get_json() == {'success': True}
