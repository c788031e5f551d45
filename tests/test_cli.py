import unittest
from unittest import mock

from click.testing import CliRunner

from carbuilder import __version__
from carbuilder.cli import carbuilder
from carbuilder.constants import FAILED_RETURN_CODE
from carbuilder.decorators import return_code_manager
from carbuilder.exceptions import InvalidValueError


class CarBuilderCommandsTest(unittest.TestCase):

    def setUp(self) -> None:
        self.runner = CliRunner()

    def test_version(self):
        result = self.runner.invoke(carbuilder, ['--version'])
        self.assertEqual(result.exit_code, 0)
        self.assertIn(__version__, result.output)

    def test_make_sports_car(self):
        result = self.runner.invoke(carbuilder, ['make'])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn('Car:', result.output)
        self.assertIn('SportEngine', result.output)
        self.assertIn('Manual:', result.output)
        self.assertIn('Trip computer', result.output)

    def test_make_car_only(self):
        result = self.runner.invoke(carbuilder, ['make', '--product', 'car'])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn('Car:', result.output)
        self.assertNotIn('Manual:', result.output)

    def test_make_suv(self):
        result = self.runner.invoke(carbuilder,
                                    ['make', '--profile', 'suv'])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(result.output.count('<empty>'), 2)

    def test_make_unknown_profile(self):
        result = self.runner.invoke(carbuilder,
                                    ['make', '--profile', 'cabriolet'])
        self.assertEqual(result.exit_code, 2)
        self.assertIn('cabriolet', result.output)

    def test_profiles(self):
        result = self.runner.invoke(carbuilder, ['profiles'])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn('sports_car', result.output)
        self.assertIn('suv', result.output)


class ReturnCodeManagerTest(unittest.TestCase):

    def test_handled_error_exits_with_failure(self):
        @return_code_manager
        def command():
            raise InvalidValueError('Unknown profile')

        with self.assertRaises(SystemExit) as context:
            command()
        self.assertEqual(context.exception.code, FAILED_RETURN_CODE)

    def test_unexpected_error_exits_with_failure(self):
        @return_code_manager
        def command():
            raise KeyError('seats')

        with self.assertRaises(SystemExit) as context:
            command()
        self.assertEqual(context.exception.code, FAILED_RETURN_CODE)

    @mock.patch('carbuilder.decorators.USER_LOG')
    def test_error_messages(self, user_log):
        """
        Tests that carbuilder errors are reported by name, while any other
        error is reported as an unexpected one.
        """
        def raising(error):
            def command():
                raise error
            return return_code_manager(command)

        self.assertRaises(SystemExit,
                          raising(InvalidValueError('Unknown profile')))
        user_log.error.assert_called_with(
            'InvalidValueError occurred: Unknown profile')

        self.assertRaises(SystemExit, raising(ValueError('no seats')))
        user_log.error.assert_called_with(
            'An unexpected error occurred: ValueError no seats')

    def test_not_ok_return_code(self):
        with self.assertRaises(SystemExit) as context:
            return_code_manager(lambda: 2)()
        self.assertEqual(context.exception.code, 2)

    def test_ok_return_code(self):
        self.assertEqual(return_code_manager(lambda: 0)(), 0)


if __name__ == '__main__':
    unittest.main()
