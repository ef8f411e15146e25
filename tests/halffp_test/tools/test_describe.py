import io
from contextlib import redirect_stderr, redirect_stdout
from unittest import TestCase

from halffp.bits.utils import ParseError
from halffp.tools import describe


def run(argv):
    out = io.StringIO()
    err = io.StringIO()
    with redirect_stdout(out), redirect_stderr(err):
        status = describe.main(argv)
    return status, out.getvalue(), err.getvalue()


class CategoryTest(TestCase):
    def test_category(self):
        self.assertEqual(describe.category(0x7c01), 'snan')
        self.assertEqual(describe.category(0x7e00), 'nan')
        self.assertEqual(describe.category(0xfc00), 'inf')
        self.assertEqual(describe.category(0x8000), 'zero')
        self.assertEqual(describe.category(0x03ff), 'subnormal')
        self.assertEqual(describe.category(0x0400), 'normal')

    def test_describe(self):
        line = describe.describe(0x3c00)
        self.assertTrue(line.startswith('0x3c00  1.0'))
        self.assertIn('normal', line)
        self.assertTrue(line.endswith('float16(5,11): 0 01111 (1) 0000000000'))


class ReadInputTest(TestCase):
    def test_read(self):
        self.assertEqual(describe.read_input('0x3c00'), 0x3c00)
        self.assertEqual(describe.read_input('0X7C00'), 0x7c00)
        self.assertEqual(describe.read_input('3c00', bits=True), 0x3c00)
        self.assertEqual(describe.read_input('1.5'), 0x3e00)

    def test_bad_input(self):
        with self.assertRaises(ParseError):
            describe.read_input('0x10000')
        with self.assertRaises(ParseError):
            describe.read_input('0xzz')
        with self.assertRaises(ParseError):
            describe.read_input('zz', bits=True)
        with self.assertRaises(ParseError):
            describe.read_input('one')


class MainTest(TestCase):
    def test_values(self):
        status, out, err = run(['0x3c00', '0.1', 'inf'])
        self.assertEqual(status, 0)
        lines = out.splitlines()
        self.assertEqual(len(lines), 3)
        self.assertTrue(lines[0].startswith('0x3c00'))
        self.assertTrue(lines[1].startswith('0x2e66  0.1'))
        self.assertTrue(lines[2].startswith('0x7c00  inf'))
        self.assertEqual(err, '')

    def test_bad_value(self):
        status, out, err = run(['1.0', 'bogus', '2.0'])
        self.assertEqual(status, 1)
        self.assertEqual(len(out.splitlines()), 2)
        self.assertIn('bogus', err)

    def test_table(self):
        status, out, err = run(['--table', '--exponent', '0'])
        self.assertEqual(status, 0)
        lines = out.splitlines()
        # both signs, 1024 fractions each
        self.assertEqual(len(lines), 2048)
        self.assertTrue(lines[0].startswith('0x0000'))
        self.assertTrue(lines[-1].startswith('0x83ff'))

    def test_verbose(self):
        with self.assertLogs('halffp.tools.describe', level='DEBUG') as logs:
            status, out, err = run(['-v', '0.1'])
        self.assertEqual(status, 0)
        self.assertIn('0x2e66', logs.output[0])

    def test_nothing(self):
        status, out, err = run([])
        self.assertEqual(status, 0)
        self.assertIn('nothing to do', out)
