from json import load
import os.path

from tests import BaseTestCase

class TestConfig(BaseTestCase):
    def test_default_config_is_packaged(self):
        config_file = os.path.join(self.app.root_path, 'config-default.json')
        self.assertTrue(os.path.exists(config_file))
        with open(config_file) as f:
            config = load(f)
        self.assertEqual(config['CACHE_TYPE'], 'SimpleCache')
        self.assertIn('admin', config['ROLE_ASSIGNMENTS']['admin@example.com'])
