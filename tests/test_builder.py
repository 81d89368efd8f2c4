import unittest

from patternbook.commons.oop.patterns import (
    IBuilder, ConcreteBuilder, Director, Product
)
from patternbook.exceptions import InvalidTypeError, BuilderNotAssignedError


class ProductTest(unittest.TestCase):

    def setUp(self) -> None:
        self.product = Product()

    def test_insertion_order_and_duplicates(self):
        """
        Tests that parts keep insertion order and may repeat.
        """
        for part in ('PartB1', 'PartA1', 'PartB1'):
            self.product.append(part)
        self.assertEqual(self.product.parts, ['PartB1', 'PartA1', 'PartB1'])
        self.assertEqual(len(self.product), 3)

    def test_parts_is_a_copy(self):
        self.product.append('PartA1')
        self.product.parts.append('PartZ1')
        self.assertEqual(self.product.parts, ['PartA1'])

    def test_list_parts(self):
        self.product.append('PartA1')
        self.product.append('PartC1')
        self.assertEqual(self.product.list_parts(),
                         'Product parts: PartA1, PartC1')

    def test_list_parts_with_repeated_last_part(self):
        """
        Tests that a part equal to the last one is still separated.
        """
        for part in ('PartA1', 'PartA1'):
            self.product.append(part)
        self.assertEqual(self.product.list_parts(),
                         'Product parts: PartA1, PartA1')


class ConcreteBuilderTest(unittest.TestCase):

    def setUp(self) -> None:
        self.builder = ConcreteBuilder()

    def test_is_builder(self):
        self.assertIsInstance(self.builder, IBuilder)

    def test_new_builder_holds_empty_product(self):
        self.assertEqual(self.builder.product.parts, [])

    def test_direct_steps(self):
        """
        Tests that steps may be invoked directly, in any order and subset.
        """
        self.builder.produce_part_a()
        self.builder.produce_part_c()
        self.assertEqual(self.builder.product.parts, ['PartA1', 'PartC1'])

    def test_reversed_steps(self):
        self.builder.produce_part_c()
        self.builder.produce_part_b()
        self.builder.produce_part_a()
        self.assertEqual(self.builder.product.parts,
                         ['PartC1', 'PartB1', 'PartA1'])

    def test_reset_on_retrieve(self):
        """
        Tests that an immediate second retrieval yields an empty product.
        """
        self.builder.produce_part_a()
        _ = self.builder.product
        self.assertEqual(self.builder.product.parts, [])

    def test_retrieved_product_is_not_mutated(self):
        """
        Tests that steps taken after a retrieval affect only the new
        internal product.
        """
        self.builder.produce_part_a()
        product = self.builder.product
        self.builder.produce_part_b()
        self.builder.produce_part_c()
        self.assertEqual(product.parts, ['PartA1'])
        self.assertIsNot(product, self.builder.product)

    def test_attach_arbitrary_part(self):
        self.builder.attach('PartX1')
        self.builder.produce_part_a()
        self.assertEqual(self.builder.product.parts, ['PartX1', 'PartA1'])

    def test_attach_non_string_part(self):
        self.assertRaises(InvalidTypeError, self.builder.attach, 42)


class DirectorTest(unittest.TestCase):

    def setUp(self) -> None:
        self.builder = ConcreteBuilder()
        self.director = Director()
        self.director.builder = self.builder

    def test_minimal_viable_product(self):
        self.director.build_minimal_viable_product()
        self.assertEqual(self.builder.product.parts, ['PartA1'])

    def test_full_featured_product(self):
        self.director.build_full_featured_product()
        self.assertEqual(self.builder.product.parts,
                         ['PartA1', 'PartB1', 'PartC1'])

    def test_recipes_reuse_builder(self):
        """
        Tests that consecutive recipes on the same builder produce
        independent products.
        """
        self.director.build_minimal_viable_product()
        minimal = self.builder.product
        self.director.build_full_featured_product()
        full = self.builder.product
        self.assertEqual(minimal.parts, ['PartA1'])
        self.assertEqual(full.parts, ['PartA1', 'PartB1', 'PartC1'])

    def test_builder_passed_to_constructor(self):
        director = Director(self.builder)
        self.assertIs(director.builder, self.builder)

    def test_invalid_builder(self):
        def assign():
            self.director.builder = object()
        self.assertRaises(InvalidTypeError, assign)

    def test_detach_builder(self):
        """
        Tests that assigning None detaches the builder from the director.
        """
        self.director.builder = None
        self.assertIsNone(self.director.builder)
        self.assertRaises(BuilderNotAssignedError,
                          self.director.build_minimal_viable_product)

    def test_missing_builder(self):
        director = Director()
        self.assertIsNone(director.builder)
        self.assertRaises(BuilderNotAssignedError,
                          director.build_minimal_viable_product)
        self.assertRaises(BuilderNotAssignedError,
                          director.build_full_featured_product)


if __name__ == '__main__':
    unittest.main()
