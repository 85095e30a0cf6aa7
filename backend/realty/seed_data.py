SAMPLE_PROPERTIES = [
    {
        "title": "Современная квартира в центре Москвы",
        "description": (
            "Просторная 3-комнатная квартира в престижном районе с отличной транспортной доступностью. "
            "Квартира полностью отремонтирована, с качественной мебелью и техникой."
        ),
        "shortDescription": "Просторная 3-комнатная квартира в престижном районе с отличной транспортной доступностью.",
        "price": 15000000,
        "area": 85,
        "location": "Центральный район, Москва",
        "address": "ул. Тверская, 15",
        "coordinates": [55.7558, 37.6176],
        "type": "Жилые помещения",
        "transactionType": "Продажа",
        "investmentReturn": "до 25% в год",
        "images": [
            "https://images.unsplash.com/photo-1560448204-e02f11c3d0e2?w=800",
            "https://images.unsplash.com/photo-1560448075-bb485b067938?w=800",
        ],
        "isFeatured": True,
        "layout": "3 комнаты, кухня, 2 санузла",
        "specifications": {
            "rooms": 3,
            "bathrooms": 2,
            "parking": True,
            "balcony": True,
            "elevator": True,
            "furnished": True,
        },
    },
    {
        "title": "Офисное помещение в бизнес-центре",
        "description": (
            "Современное офисное помещение класса А в новом бизнес-центре. "
            "Отличная локация для ведения бизнеса, удобная парковка."
        ),
        "shortDescription": "Современное офисное помещение класса А в новом бизнес-центре.",
        "price": 120000,
        "area": 150,
        "location": "Деловой центр, Москва",
        "address": "Московский проспект, 45",
        "coordinates": [55.7387, 37.6032],
        "type": "Нежилые помещения",
        "transactionType": "Аренда",
        "investmentReturn": "до 30% в год",
        "images": [
            "https://images.unsplash.com/photo-1497366216548-37526070297c?w=800",
            "https://images.unsplash.com/photo-1497366811353-6870744d04b2?w=800",
        ],
        "isFeatured": True,
        "layout": "Открытое пространство, переговорная, кухня",
        "specifications": {"parking": True, "elevator": True, "furnished": False},
    },
    {
        "title": "Машино-место в подземном паркинге",
        "description": (
            "Удобное машино-место в охраняемом подземном паркинге жилого комплекса. "
            "Круглосуточная охрана, видеонаблюдение."
        ),
        "shortDescription": "Удобное машино-место в охраняемом подземном паркинге жилого комплекса.",
        "price": 2500000,
        "area": 15,
        "location": 'Жилой комплекс "Северный", Москва',
        "address": "ул. Северная, 12",
        "coordinates": [55.8431, 37.6156],
        "type": "Машино-места",
        "transactionType": "Продажа",
        "investmentReturn": "до 15% в год",
        "images": ["https://images.unsplash.com/photo-1506905925346-21bda4d32df4?w=800"],
        "isFeatured": False,
        "layout": "Стандартное машино-место",
        "specifications": {"parking": True},
    },
    {
        "title": "Гараж-бокс в кооперативе",
        "description": (
            "Просторный гараж-бокс в охраняемом кооперативе. "
            "Есть смотровая яма, электричество, отопление."
        ),
        "shortDescription": "Просторный гараж-бокс в охраняемом кооперативе со смотровой ямой.",
        "price": 1800000,
        "area": 24,
        "location": 'Гаражный кооператив "Автолюбитель"',
        "address": "ул. Промышленная, 8",
        "coordinates": [55.6892, 37.5547],
        "type": "Гараж-боксы",
        "transactionType": "Продажа",
        "investmentReturn": "до 12% в год",
        "images": ["https://images.unsplash.com/photo-1558618666-fcd25c85cd64?w=800"],
        "isFeatured": False,
        "layout": "Гараж со смотровой ямой",
        "specifications": {"parking": True},
    },
    {
        "title": "Торговое помещение на первом этаже",
        "description": (
            "Торговое помещение с отдельным входом на первом этаже жилого дома. "
            "Высокий трафик, отличная видимость."
        ),
        "shortDescription": "Торговое помещение с отдельным входом на первом этаже жилого дома.",
        "price": 80000,
        "area": 75,
        "location": "Торговая улица, центр города",
        "address": "ул. Торговая, 23",
        "coordinates": [55.7522, 37.6156],
        "type": "Нежилые помещения",
        "transactionType": "Аренда",
        "investmentReturn": "до 35% в год",
        "images": [
            "https://images.unsplash.com/photo-1441986300917-64674bd600d8?w=800",
            "https://images.unsplash.com/photo-1560472354-b33ff0c44a43?w=800",
        ],
        "isFeatured": True,
        "layout": "Торговый зал, подсобное помещение, санузел",
        "specifications": {"parking": False, "elevator": False, "furnished": False},
    },
    {
        "title": "Студия в новостройке",
        "description": (
            "Уютная студия в новом жилом комплексе. Современная планировка, "
            "качественная отделка, панорамные окна."
        ),
        "shortDescription": "Уютная студия в новом жилом комплексе с современной планировкой.",
        "price": 8500000,
        "area": 35,
        "location": 'ЖК "Новые горизонты"',
        "address": "ул. Новостроительная, 5",
        "coordinates": [55.7789, 37.5899],
        "type": "Жилые помещения",
        "transactionType": "Продажа",
        "investmentReturn": "до 20% в год",
        "images": [
            "https://images.unsplash.com/photo-1522708323590-d24dbb6b0267?w=800",
            "https://images.unsplash.com/photo-1560448204-61dc36dc98c8?w=800",
        ],
        "isFeatured": False,
        "layout": "Студия, кухня-гостиная, санузел",
        "specifications": {
            "rooms": 1,
            "bathrooms": 1,
            "parking": True,
            "balcony": True,
            "elevator": True,
            "furnished": False,
        },
    },
]
