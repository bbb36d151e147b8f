from .cell_service import CellService, create_cell_service

__all__ = ['CellService', 'create_cell_service']
