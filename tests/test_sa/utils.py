# tests/test_sa/utils.py
from typing import Any, Dict, List
from sqlalchemy import inspect
from sqlalchemy.orm import Session

class DBInspector:
    def __init__(self, session: Session):
        self.session = session
        self.engine = session.get_bind()
        self.inspector = inspect(self.engine)

    def get_table_info(self, table_name: str) -> Dict[str, Any]:
        """Get detailed information about a specific table"""
        return {
            'columns': self.inspector.get_columns(table_name),
            'primary_key': self.inspector.get_pk_constraint(table_name),
            'foreign_keys': self.inspector.get_foreign_keys(table_name),
            'unique_constraints': self.inspector.get_unique_constraints(table_name),
        }

def compare_model_to_db(session: Session, model_class) -> List[str]:
    """Compare SQLAlchemy model to actual database table"""
    differences = []
    db_info = DBInspector(session).get_table_info(model_class.__tablename__)

    model_columns = {c.key: c for c in inspect(model_class).columns}
    db_columns = {c['name']: c for c in db_info['columns']}

    for col_name, column in model_columns.items():
        if col_name not in db_columns:
            differences.append(f"Column '{col_name}' exists in model but not in database")
        elif db_columns[col_name]['nullable'] != column.nullable:
            differences.append(f"Column '{col_name}' nullability differs")

    for col_name in db_columns:
        if col_name not in model_columns:
            differences.append(f"Column '{col_name}' exists in database but not in model")

    return differences

def cascading_foreign_keys(session: Session, table_name: str) -> Dict[str, str]:
    """Map each foreign key column to the table it cascades from"""
    return {
        fk['constrained_columns'][0]: fk['referred_table']
        for fk in DBInspector(session).get_table_info(table_name)['foreign_keys']
        if (fk.get('options') or {}).get('ondelete') == 'CASCADE'
    }
