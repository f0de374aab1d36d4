import unittest

from enumgen.core.error_context import error_context, format_error_with_context
from enumgen.core.error_handling import (
    EnumGenError,
    InconsistentStateError,
    ParseError,
    WriteError,
)


class ErrorHandlingTests(unittest.TestCase):
    """Tests for the exception hierarchy and stage context."""

    def test_context_in_str(self):
        error = ParseError('Syntax error', path='a.go', line=3, column=7)
        self.assertEqual(error.position, (3, 7))
        self.assertIn('line=3', str(error))
        self.assertIn('path=a.go', str(error))

    def test_hierarchy(self):
        for error in (ParseError('x'), WriteError('a.go', 'denied'), InconsistentStateError('t', 'Values')):
            self.assertIsInstance(error, EnumGenError)

    def test_error_context_adds_stage(self):
        with self.assertRaises(WriteError) as ctx:
            with error_context('write', path='a.go'):
                raise WriteError('a.go', 'denied')
        self.assertEqual(ctx.exception.stage, 'write')

    def test_innermost_stage_wins(self):
        with self.assertRaises(EnumGenError) as ctx:
            with error_context('parse'):
                with error_context('read'):
                    raise EnumGenError('boom')
        self.assertEqual(ctx.exception.stage, 'read')

    def test_foreign_exception_wrapped(self):
        with self.assertRaises(EnumGenError) as ctx:
            with error_context('synthesize', type_name='t'):
                raise KeyError('missing')
        self.assertEqual(ctx.exception.stage, 'synthesize')
        self.assertIsInstance(ctx.exception.__cause__, KeyError)
        self.assertEqual(ctx.exception.context['type_name'], 't')

    def test_format_names_stage_first(self):
        error = InconsistentStateError('gender', 'Values')
        error.add_context('stage', 'merge')
        message = format_error_with_context(error)
        self.assertTrue(message.startswith('[merge] '))
        self.assertIn("Method 'Values' on type 'gender'", message)

    def test_format_plain_exception(self):
        self.assertEqual(format_error_with_context(ValueError('bad')), 'ValueError: bad')


if __name__ == '__main__':
    unittest.main()
