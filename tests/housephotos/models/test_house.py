"""
Unit tests for house models
"""
import pytest
from pydantic import ValidationError

from src.housephotos.models.house import House, HousesPage


class TestHouse:
    """Tests for House model"""

    def test_decodes_api_field_names(self):
        """Test that photoURL maps onto photo_url"""
        house = House.model_validate({
            "id": 7,
            "address": "8 Elm St.",
            "homeowner": "Jane Doe",
            "price": 250000,
            "photoURL": "https://img.example.com/house7.jpg",
        })

        assert house.id == 7
        assert house.photo_url == "https://img.example.com/house7.jpg"
        assert house.to_dict()["photoURL"] == house.photo_url

    def test_house_is_immutable(self):
        """Test that decoded houses cannot be modified"""
        house = House(id=1, address="1 A St", homeowner="A", price=1, photo_url="http://x/1.jpg")

        with pytest.raises(ValidationError):
            house.address = "2 B St"

    def test_missing_field_rejected(self):
        """Test that a house without an id is invalid"""
        with pytest.raises(ValidationError):
            House.model_validate({"address": "1 A St", "homeowner": "A", "price": 1, "photoURL": "x"})

    @pytest.mark.parametrize("field,value", [
        ("id", "7"),
        ("price", True),
        ("price", "250000"),
        ("address", 8),
    ])
    def test_wrong_types_not_coerced(self, field, value):
        """Test that mistyped values are rejected instead of converted"""
        data = {
            "id": 7,
            "address": "8 Elm St.",
            "homeowner": "Jane Doe",
            "price": 250000,
            "photoURL": "https://img.example.com/house7.jpg",
        }
        data[field] = value

        with pytest.raises(ValidationError):
            House.model_validate(data)

    def test_normalized_address_strips_trailing_dots(self):
        """Test trailing dot removal"""
        house = House(id=1, address="12 Oak Ave...", homeowner="A", price=1, photo_url="http://x/1.jpg")
        assert house.normalized_address == "12 Oak Ave"

    def test_normalized_address_keeps_inner_dots(self):
        """Test that only trailing dots are removed"""
        house = House(id=1, address="St. Louis Rd.", homeowner="A", price=1, photo_url="http://x/1.jpg")
        assert house.normalized_address == "St. Louis Rd"

    @pytest.mark.parametrize("url,expected", [
        ("https://img.example.com/a/house.jpg", "jpg"),
        ("https://img.example.com/house.jpeg?size=large", "jpeg"),
        ("https://img.example.com/photo.tar.png", "png"),
        ("https://img.example.com/photo", ""),
    ])
    def test_photo_extension(self, url, expected):
        """Test extension parsing from the photo URL path"""
        house = House(id=1, address="1 A St", homeowner="A", price=1, photo_url=url)
        assert house.photo_extension == expected


class TestHousesPage:
    """Tests for HousesPage model"""

    def test_page_keeps_listed_order(self):
        """Test that houses keep the order the API lists them in"""
        page = HousesPage.model_validate({
            "houses": [
                {"id": 3, "address": "c", "homeowner": "C", "price": 3, "photoURL": "http://x/3.jpg"},
                {"id": 1, "address": "a", "homeowner": "A", "price": 1, "photoURL": "http://x/1.jpg"},
            ]
        })
        assert [h.id for h in page.houses] == [3, 1]

    def test_empty_page(self):
        """Test that a page without houses decodes to an empty list"""
        assert HousesPage.model_validate({}).houses == []
