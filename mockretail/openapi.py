"""
Per-resource OpenAPI documents.

The full document comes from the FastAPI app; ``generate`` writes one JSON
file per resource into OPENAPI_DIR, which the Flask app serves as-is.

    python -m mockretail.openapi generate [--out DIR]
    python -m mockretail.openapi clean [--out DIR]
"""
import argparse
import json
import logging
import os

from . import config

logger = logging.getLogger(__name__)


def filter_paths(paths, prefix):
    return {key: value for key, value in (paths or {}).items() if key.startswith(prefix)}


def split_spec(full, name):
    """subset of the full document covering /api/<name> only"""
    info = dict(full.get('info') or {'title': config.API_NAME, 'version': config.API_VERSION})
    info['title'] = f'{config.API_NAME} – {name.capitalize()}'
    return {
        'openapi': full.get('openapi', '3.1.0'),
        'info': info,
        'servers': full.get('servers') or [{'url': '/', 'description': 'Relative to host'}],
        'paths': filter_paths(full.get('paths'), f'/api/{name}'),
        'components': dict(full.get('components') or {}),
    }


def generate(out_dir=None):
    """write <name>.json per resource, returns the paths written"""
    # imported here so the Flask side never needs FastAPI loaded
    from .asgi import create_app

    out_dir = out_dir or config.OPENAPI_DIR
    if not os.path.isdir(out_dir):
        os.makedirs(out_dir)
        logger.info(f'Created {out_dir}')

    full = create_app().openapi()
    written = []
    for name in config.RESOURCES:
        spec = split_spec(full, name)
        if not spec['paths']:
            logger.warning(f'No paths found for /api/{name}; skipping {name}.json')
            continue
        path = os.path.join(out_dir, f'{name}.json')
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(spec, f, indent=2, ensure_ascii=False)
        logger.info(f'Wrote {path}')
        written.append(path)
    return written


def clean(out_dir=None):
    """remove generated files, returns the paths deleted"""
    out_dir = out_dir or config.OPENAPI_DIR
    if not os.path.isdir(out_dir):
        logger.info(f'{out_dir} does not exist; nothing to clean')
        return []
    deleted = []
    for name in config.RESOURCES:
        path = os.path.join(out_dir, f'{name}.json')
        if os.path.exists(path):
            os.remove(path)
            logger.info(f'Deleted {path}')
            deleted.append(path)
    return deleted


def main(argv=None):
    parser = argparse.ArgumentParser(prog='mockretail.openapi', description='Generate or clean per-resource OpenAPI specs')
    parser.add_argument('command', nargs='?', choices=['generate', 'clean'], default='generate')
    parser.add_argument('--out', default=config.OPENAPI_DIR, help='output directory (default: %(default)s)')
    args = parser.parse_args(argv)

    logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)
    if args.command == 'clean':
        clean(args.out)
    else:
        generate(args.out)
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
