"""
Management command to render a doc comment to HTML.

Reads a comment from a file (or "-" for stdin), formats it with Markdown and
the inline tag scanner, and writes the HTML to stdout. Useful for checking
how a comment will look before rebuilding the documentation.
"""

import json
import sys
from pathlib import Path

from django.core.management.base import BaseCommand, CommandError

from doccomments.formatter import DocFormatter
from doccomments.html import strip_tags
from doccomments.relations import Relations


class Command(BaseCommand):
    help = 'Render a doc comment file to HTML'

    def add_arguments(self, parser):
        parser.add_argument(
            'path',
            type=str,
            help='Doc comment file to render, or "-" to read stdin',
        )
        parser.add_argument(
            '--html',
            action='store_true',
            help='Input is already HTML: replace inline tags without Markdown rendering',
        )
        parser.add_argument(
            '--shorten',
            action='store_true',
            help='Print the shortened summary instead of the full HTML',
        )
        parser.add_argument(
            '--max-length',
            type=int,
            help='Maximum summary length in characters (default: DOC_COMMENTS setting)',
        )
        parser.add_argument(
            '--img-path',
            type=str,
            help='Base path prefixed to {@img} urls',
        )
        parser.add_argument(
            '--class-context',
            type=str,
            default='',
            help='Class that bare #member references belong to',
        )
        parser.add_argument(
            '--relations',
            type=str,
            help='JSON file describing known classes and their members',
        )

    def handle(self, *args, **options):
        path = options['path']
        verbosity = options.get('verbosity', 1)

        text = self._read_input(path)

        formatter = DocFormatter(relations=self._load_relations(options.get('relations')))
        formatter.doc_context = {'filename': path if path != '-' else '<stdin>'}
        formatter.class_context = options.get('class_context') or ''

        try:
            if options.get('max_length') is not None:
                formatter.max_length = options['max_length']
        except ValueError as e:
            raise CommandError(str(e))

        if options.get('img_path'):
            formatter.img_path = options['img_path']

        if options.get('shorten'):
            if formatter.too_long(text):
                self.stdout.write(formatter.shorten(text))
            else:
                self.stdout.write(strip_tags(text).strip())
            return

        if options.get('html'):
            html = formatter.replace(text)
        else:
            html = formatter.format(text)
        self.stdout.write(html)

        if verbosity >= 2:
            images = formatter.images
            self.stderr.write(f'Images referenced: {len(images)}')
            for image in images:
                self.stderr.write(f'  - {image}')

    def _read_input(self, path):
        if path == '-':
            return sys.stdin.read()
        try:
            return Path(path).read_text(encoding='utf-8')
        except OSError as e:
            raise CommandError(f'Cannot read {path}: {e}')

    def _load_relations(self, path):
        if not path:
            return Relations()
        try:
            data = json.loads(Path(path).read_text(encoding='utf-8'))
        except (OSError, ValueError) as e:
            raise CommandError(f'Cannot load relations from {path}: {e}')
        if not isinstance(data, dict):
            raise CommandError(f'Relations file {path} must contain a JSON object')
        return Relations.from_dict(data)
