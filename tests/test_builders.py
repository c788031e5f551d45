import unittest

from carbuilder.patterns import (
    IBuilder, AbstractBuilder, CarBuilder, CarManualBuilder
)
from carbuilder.products import Car, Manual


class BuilderInterfaceTest(unittest.TestCase):

    def test_interface_is_abstract(self):
        self.assertRaises(TypeError, IBuilder)

    def test_incomplete_builder(self):
        """
        Tests that a builder, which misses any of the building steps,
        cannot be instantiated.
        """
        class SeatlessBuilder(AbstractBuilder):
            def reset(self):
                pass

            def set_engine(self, engine):
                pass

            def set_trip_computer(self, enabled):
                pass

            def set_gps(self, enabled):
                pass

        self.assertRaises(TypeError, SeatlessBuilder)

    def test_builder_without_reset(self):
        """
        Tests that the builder base leaves `reset` abstract, thus a
        builder which cannot start over with a fresh product cannot be
        instantiated.
        """
        class ResetlessBuilder(AbstractBuilder):
            def set_seats(self, count):
                pass

            def set_engine(self, engine):
                pass

            def set_trip_computer(self, enabled):
                pass

            def set_gps(self, enabled):
                pass

        self.assertRaises(TypeError, ResetlessBuilder)

    def test_construction_resets_once(self):
        class CountingBuilder(AbstractBuilder):
            resets = 0

            def reset(self):
                self.resets += 1

            def set_seats(self, count):
                pass

            def set_engine(self, engine):
                pass

            def set_trip_computer(self, enabled):
                pass

            def set_gps(self, enabled):
                pass

        self.assertEqual(CountingBuilder().resets, 1)

    def test_product_accessor_is_not_shared(self):
        self.assertFalse(hasattr(IBuilder, 'get_product'))
        self.assertFalse(hasattr(AbstractBuilder, 'get_product'))


class CarBuilderTest(unittest.TestCase):

    def setUp(self) -> None:
        self.builder = CarBuilder()

    def _configure(self):
        self.builder.set_seats(4)
        self.builder.set_engine('DieselEngine')
        self.builder.set_trip_computer(True)
        self.builder.set_gps(False)

    def test_fresh_builder_holds_empty_car(self):
        car = self.builder.get_product()
        self.assertIsInstance(car, Car)
        self.assertTrue(car.is_empty())

    def test_steps_configure_car(self):
        self._configure()
        car = self.builder.get_product()
        self.assertEqual(car, Car(seats=4, engine='DieselEngine',
                                  trip_computer=True, gps=False))
        self.assertFalse(car.is_empty())

    def test_product_retrieval_resets_builder(self):
        """
        Tests that the car builder is ready to produce another car
        right after the previous one has been retrieved.
        """
        self._configure()
        first = self.builder.get_product()
        second = self.builder.get_product()
        self.assertIsNot(first, second)
        self.assertFalse(first.is_empty())
        self.assertTrue(second.is_empty())

    def test_reset_discards_progress(self):
        self._configure()
        self.builder.reset()
        self.assertTrue(self.builder.get_product().is_empty())


class CarManualBuilderTest(unittest.TestCase):

    def setUp(self) -> None:
        self.builder = CarManualBuilder()

    def test_fresh_builder_holds_empty_manual(self):
        manual = self.builder.get_product()
        self.assertIsInstance(manual, Manual)
        self.assertTrue(manual.is_empty())

    def test_steps_document_features(self):
        self.builder.set_seats(2)
        self.builder.set_engine('SportEngine')
        self.builder.set_trip_computer(True)
        self.builder.set_gps(False)
        titles = [title for title, _ in self.builder.get_product().sections]
        self.assertEqual(titles, ['Seats', 'Engine', 'Trip computer', 'GPS'])
        _, engine_text = self.builder.get_product().sections[1]
        self.assertIn('SportEngine', engine_text)

    def test_product_retrieval_keeps_manual(self):
        """
        Tests that the manual builder holds on to the produced manual,
        until it is explicitly reset.
        """
        self.builder.set_seats(2)
        first = self.builder.get_product()
        second = self.builder.get_product()
        self.assertIs(first, second)
        self.assertEqual(len(second.sections), 1)

    def test_explicit_reset_starts_new_manual(self):
        self.builder.set_seats(2)
        first = self.builder.get_product()
        self.builder.reset()
        second = self.builder.get_product()
        self.assertIsNot(first, second)
        self.assertTrue(second.is_empty())
        self.assertFalse(first.is_empty())


if __name__ == '__main__':
    unittest.main()
