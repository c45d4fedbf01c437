import importlib

MODULES = [
    'crawlgate.config',
    'crawlgate.container',
    'crawlgate.exceptions',
    'crawlgate.domain',
    'crawlgate.services.protocols',
    'crawlgate.services.parse_filter',
    'crawlgate.services.parse_filter_chain',
    'crawlgate.services.requests_adapter',
]

def test_imports():
    for m in MODULES:
        importlib.import_module(m)
