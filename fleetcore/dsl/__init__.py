"""Namespace for query-building helpers; it holds no modules at present."""