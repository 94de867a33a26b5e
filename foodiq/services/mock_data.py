"""Canned Yelp-shaped business records for the mock provider."""

MOCK_BUSINESSES: list[dict] = [
    {
        "id": "joes-pizza-new-york",
        "name": "Joe's Pizza",
        "image_url": "https://images.example.com/joes-pizza.jpg",
        "url": "https://www.yelp.com/biz/joes-pizza-new-york",
        "rating": 4.5,
        "review_count": 5420,
        "price": "$",
        "phone": "+12123661182",
        "display_phone": "(212) 366-1182",
        "location": {
            "address1": "7 Carmine St",
            "city": "New York",
            "state": "NY",
            "zip_code": "10014",
        },
        "coordinates": {"latitude": 40.730599, "longitude": -74.002141},
        "categories": [{"alias": "pizza", "title": "Pizza"}],
        "distance": 1207.0,
        "is_closed": False,
        "transactions": ["pickup", "delivery"],
        "photos": [
            "https://images.example.com/joes-pizza.jpg",
            "https://images.example.com/joes-pizza-slice.jpg",
        ],
        "hours": [{"hours_type": "REGULAR", "is_open_now": True}],
    },
    {
        "id": "carbone-new-york",
        "name": "Carbone",
        "image_url": "https://images.example.com/carbone.jpg",
        "url": "https://www.yelp.com/biz/carbone-new-york",
        "rating": 4.3,
        "review_count": 2871,
        "price": "$$$$",
        "phone": "+12122543000",
        "display_phone": "(212) 254-3000",
        "location": {
            "address1": "181 Thompson St",
            "city": "New York",
            "state": "NY",
            "zip_code": "10012",
        },
        "coordinates": {"latitude": 40.727986, "longitude": -74.000019},
        "categories": [{"alias": "italian", "title": "Italian"}],
        "distance": 1530.5,
        "is_closed": False,
        "transactions": ["restaurant_reservation"],
        "photos": ["https://images.example.com/carbone.jpg"],
        "hours": [{"hours_type": "REGULAR", "is_open_now": False}],
    },
    {
        "id": "nobu-downtown-new-york",
        "name": "Nobu Downtown",
        "image_url": "https://images.example.com/nobu.jpg",
        "url": "https://www.yelp.com/biz/nobu-downtown-new-york",
        "rating": 4.2,
        "review_count": 1960,
        "price": "$$$$",
        "phone": "+12122190500",
        "display_phone": "(212) 219-0500",
        "location": {
            "address1": "195 Broadway",
            "city": "New York",
            "state": "NY",
            "zip_code": "10007",
        },
        "coordinates": {"latitude": 40.710917, "longitude": -74.009732},
        "categories": [
            {"alias": "japanese", "title": "Japanese"},
            {"alias": "sushi", "title": "Sushi Bars"},
        ],
        "distance": 3104.2,
        "is_closed": False,
        "transactions": ["delivery", "restaurant_reservation"],
        "photos": ["https://images.example.com/nobu.jpg"],
        "hours": [{"hours_type": "REGULAR", "is_open_now": True}],
    },
    {
        "id": "xian-famous-foods-new-york",
        "name": "Xi'an Famous Foods",
        "image_url": "https://images.example.com/xian.jpg",
        "url": "https://www.yelp.com/biz/xian-famous-foods-new-york",
        "rating": 4.4,
        "review_count": 3310,
        "price": "$",
        "phone": "+12127861111",
        "display_phone": "(212) 786-1111",
        "location": {
            "address1": "45 Bayard St",
            "city": "New York",
            "state": "NY",
            "zip_code": "10013",
        },
        "coordinates": {"latitude": 40.715171, "longitude": -73.997143},
        "categories": [
            {"alias": "chinese", "title": "Chinese"},
            {"alias": "noodles", "title": "Noodles"},
        ],
        "distance": 2250.8,
        "is_closed": False,
        "transactions": ["pickup", "delivery"],
        "photos": [],
        "hours": [{"hours_type": "REGULAR", "is_open_now": True}],
    },
    {
        "id": "by-chloe-new-york",
        "name": "By Chloe",
        "image_url": "https://images.example.com/by-chloe.jpg",
        "url": "https://www.yelp.com/biz/by-chloe-new-york",
        "rating": 4.0,
        "review_count": 1522,
        "price": "$$",
        "phone": "+12122904010",
        "display_phone": "(212) 290-4010",
        "location": {
            "address1": "185 Bleecker St",
            "city": "New York",
            "state": "NY",
            "zip_code": "10012",
        },
        "coordinates": {"latitude": 40.728791, "longitude": -74.000793},
        "categories": [
            {"alias": "vegan", "title": "Vegan"},
            {"alias": "burgers", "title": "Burgers"},
        ],
        "distance": 1402.6,
        "is_closed": False,
        "transactions": ["pickup"],
        "photos": ["https://images.example.com/by-chloe.jpg"],
        "hours": [],
    },
    {
        "id": "los-tacos-no-1-new-york",
        "name": "Los Tacos No.1",
        "image_url": "https://images.example.com/los-tacos.jpg",
        "url": "https://www.yelp.com/biz/los-tacos-no-1-new-york",
        "rating": 4.7,
        "review_count": 4125,
        "price": "$",
        "phone": "+12125745005",
        "display_phone": "(212) 574-5005",
        "location": {
            "address1": "75 9th Ave",
            "city": "New York",
            "state": "NY",
            "zip_code": "10011",
        },
        "coordinates": {"latitude": 40.742309, "longitude": -74.006210},
        "categories": [{"alias": "mexican", "title": "Mexican"}],
        "distance": 2655.4,
        "is_closed": False,
        "transactions": [],
        "photos": ["https://images.example.com/los-tacos.jpg"],
        "hours": [{"hours_type": "REGULAR", "is_open_now": True}],
    },
    {
        "id": "the-halal-guys-new-york",
        "name": "The Halal Guys",
        "image_url": "https://images.example.com/halal-guys.jpg",
        "url": "https://www.yelp.com/biz/the-halal-guys-new-york",
        "rating": 4.1,
        "review_count": 10210,
        "phone": "+13475271505",
        "display_phone": "(347) 527-1505",
        "location": {
            "address1": "W 53rd St & 6th Ave",
            "city": "New York",
            "state": "NY",
            "zip_code": "10019",
        },
        "coordinates": {"latitude": 40.761861, "longitude": -73.979209},
        "categories": [
            {"alias": "halal", "title": "Halal"},
            {"alias": "foodstands", "title": "Food Stands"},
        ],
        "is_closed": False,
        "transactions": ["delivery"],
        "photos": [],
        "hours": [{"hours_type": "REGULAR", "is_open_now": False}],
    },
    {
        "id": "katzs-delicatessen-new-york",
        "name": "Katz's Delicatessen",
        "image_url": "https://images.example.com/katzs.jpg",
        "url": "https://www.yelp.com/biz/katzs-delicatessen-new-york",
        "rating": 4.4,
        "review_count": 14980,
        "price": "$$",
        "phone": "+12122542246",
        "display_phone": "(212) 254-2246",
        "location": {
            "address1": "205 E Houston St",
            "city": "New York",
            "state": "NY",
            "zip_code": "10002",
        },
        "coordinates": {"latitude": 40.722237, "longitude": -73.987427},
        "categories": [
            {"alias": "delis", "title": "Delis"},
            {"alias": "sandwiches", "title": "Sandwiches"},
        ],
        "distance": 1890.1,
        "is_closed": False,
        "transactions": ["pickup", "delivery"],
        "photos": ["https://images.example.com/katzs.jpg"],
        "hours": [{"hours_type": "REGULAR", "is_open_now": True}],
    },
]
