import importlib

MODULES = [
    'wordcrawl.config',
    'wordcrawl.container',
    'wordcrawl.domain',
    'wordcrawl.profiler',
    'wordcrawl.services.crawler',
    'wordcrawl.services.config_service',
    'wordcrawl.services.page_parser',
    'wordcrawl.services.result_writer',
]

def test_imports():
    for m in MODULES:
        importlib.import_module(m)
