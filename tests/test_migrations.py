"""
Tests documenting the catalog migration's partial reverse.

Unapplying the initial migration drops only the products table. tags,
categories and product_tag stay behind, so the forward migration cannot be
re-applied until they are dropped by hand.
"""
from django.db import connection
from django.db.migrations.executor import MigrationExecutor
from django.db.utils import OperationalError, ProgrammingError
from django.test import TransactionTestCase

LATEST = [('catalog', '0002_product_catalog_fields')]
ZERO = [('catalog', None)]
KEPT_TABLES = ['product_tag', 'categories', 'tags']


class PartialReverseMigrationTests(TransactionTestCase):

    def migrate(self, targets):
        executor = MigrationExecutor(connection)
        executor.loader.build_graph()
        executor.migrate(targets)

    def tables(self):
        return set(connection.introspection.table_names())

    def drop_kept_tables(self):
        with connection.cursor() as cursor:
            for table in KEPT_TABLES:
                cursor.execute(f'DROP TABLE IF EXISTS {connection.ops.quote_name(table)}')

    def tearDown(self):
        # Leave the schema fully migrated for the remaining tests
        if 'products' not in self.tables():
            self.drop_kept_tables()
            self.migrate(LATEST)
        super().tearDown()

    def test_reverse_drops_only_products(self):
        self.migrate(ZERO)

        tables = self.tables()
        assert 'products' not in tables
        assert set(KEPT_TABLES) <= tables

    def test_forward_fails_after_partial_reverse(self):
        self.migrate(ZERO)

        with self.assertRaises((OperationalError, ProgrammingError)):
            self.migrate(LATEST)

    def test_forward_succeeds_once_kept_tables_are_dropped(self):
        self.migrate(ZERO)
        self.drop_kept_tables()

        self.migrate(LATEST)

        tables = self.tables()
        assert {'products', 'tags', 'categories', 'product_tag'} <= tables
