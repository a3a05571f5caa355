"""
Custom migration operations.
"""
import logging

from django.db import migrations

logger = logging.getLogger(__name__)


class CreateModelKeptOnReverse(migrations.CreateModel):
    """
    CreateModel whose reverse leaves the table in the database.

    Only the migration state forgets the model when unapplied, so applying
    the migration again fails until the table is dropped by hand.
    """

    def database_backwards(self, app_label, schema_editor, from_state, to_state):
        model = from_state.apps.get_model(app_label, self.name)
        logger.warning(
            "Unapplying %s.%s keeps table %s in place",
            app_label, self.name, model._meta.db_table,
        )

    def describe(self):
        return f"Create model {self.name} (table kept on reverse)"
