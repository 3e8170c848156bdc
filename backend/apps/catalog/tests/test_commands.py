import unittest

from apps.catalog.commands import CategoryFields, ProductFields


class ProductFieldsTests(unittest.TestCase):
    def test_from_raw_picks_known_fields_and_ignores_the_rest(self):
        cmd = ProductFields.from_raw(
            {"title": "Chair", "price": 49, "product_no": 7, "date": "2020-01-01"}
        )
        self.assertEqual(cmd.title, "Chair")
        self.assertEqual(cmd.price, 49)
        self.assertIsNone(cmd.text)
        self.assertNotIn("product_no", cmd.as_dict())

    def test_present_keeps_falsy_values_but_drops_none(self):
        cmd = ProductFields(title="Chair", price=0, imgurl="", text=None)
        self.assertEqual(cmd.present(), {"title": "Chair", "price": 0, "imgurl": ""})

    def test_non_mapping_payload_is_empty(self):
        self.assertEqual(ProductFields.from_raw(["title"]).present(), {})
        self.assertEqual(ProductFields.from_raw(None).present(), {})


class CategoryFieldsTests(unittest.TestCase):
    def test_from_raw(self):
        self.assertEqual(CategoryFields.from_raw({"category": "Tools"}).category, "Tools")
        self.assertIsNone(CategoryFields.from_raw("Tools").category)

    def test_present(self):
        self.assertEqual(CategoryFields().present(), {})
        self.assertEqual(CategoryFields("Tools").present(), {"category": "Tools"})
