CROPS = [
    # fruits
    {"id":"apple", "name":"Apple", "category":"fruits", "seasons":["Winter", "Spring"], "soils":["Red Lateritic", "Well-drained"], "min_temp":15, "max_temp":25, "water":"medium", "growth_days":1460, "avg_yield":20, "market_price":80,
     "image":"https://images.pexels.com/photos/102104/pexels-photo-102104.jpeg?auto=compress&cs=tinysrgb&w=800"},
    {"id":"banana", "name":"Banana", "category":"fruits", "seasons":["Summer", "Monsoon"], "soils":["Well-drained Loamy", "pH 6.0-7.5"], "min_temp":26, "max_temp":35, "water":"high", "growth_days":405, "market_price":32,
     "image":"https://images.pexels.com/photos/2872755/pexels-photo-2872755.jpeg?auto=compress&cs=tinysrgb&w=800"},
    {"id":"mango", "name":"Mango", "category":"fruits", "seasons":["Summer"], "soils":["Red Loamy", "Well-drained"], "min_temp":24, "max_temp":35, "water":"medium", "growth_days":900, "avg_yield":8, "market_price":90,
     "image":"https://imageafter.com/dbase/images/nature_food/b1mango01.jpg?auto=compress&cs=tinysrgb&w=800"},
    {"id":"grapes", "name":"Grapes", "category":"fruits", "seasons":["Summer", "Winter"], "soils":["Rich Loamy", "Well-drained"], "min_temp":20, "max_temp":32, "water":"medium", "growth_days":750, "market_price":65,
     "image":"https://images.pexels.com/photos/708777/pexels-photo-708777.jpeg?auto=compress&cs=tinysrgb&w=800"},
    {"id":"pomegranate", "name":"Pomegranate", "category":"fruits", "seasons":["Winter"], "soils":["Wide range Loamy to Sandy", "Tolerant to salinity"], "min_temp":25, "max_temp":35, "water":"low", "growth_days":450, "market_price":100,
     "image":"https://fthmb.tqn.com/o5VvwMoCqHImZj-RYWI67nYigRM=/5130x3420/filters:fill(auto,1)/usa--california--san-benito-county--ripe-pomegranates-on-tree-159237544-594ab22d5f9b58d58a2de6b0.jpg?auto=compress&cs=tinysrgb&w=800"},
    {"id":"papaya", "name":"Papaya", "category":"fruits", "seasons":["Summer", "Monsoon"], "soils":["Well-drained Uniform Texture"], "min_temp":21, "max_temp":33, "water":"medium", "growth_days":815, "market_price":25,
     "image":"https://images-prod.healthline.com/hlcmsresource/images/AN_images/papaya-benefits-1296x728-feature.jpg?auto=compress&cs=tinysrgb&w=800"},
    {"id":"guava", "name":"Guava", "category":"fruits", "seasons":["Winter", "Monsoon"], "soils":["Well-drained Loamy", "Tolerant to salinity/alkalinity"], "min_temp":23, "max_temp":28, "water":"medium", "growth_days":912, "market_price":50,
     "image":"https://tropikalmeyveler.com/wp-content/uploads/2019/03/whole-fresh-guava-fruit-PK5DQQB-1.jpg?auto=compress&cs=tinysrgb&w=800"},
    {"id":"pineapple", "name":"Pineapple", "category":"fruits", "seasons":["Summer", "Monsoon"], "soils":["Light Well-drained Sandy/Loamy"], "min_temp":22, "max_temp":32, "water":"medium", "growth_days":630, "market_price":40,
     "image":"https://images.pexels.com/photos/947879/pexels-photo-947879.jpeg?auto=compress&cs=tinysrgb&w=800"},
    {"id":"watermelon", "name":"Watermelon", "category":"fruits", "seasons":["Summer"], "soils":["Sandy Loam Rich in Organics"], "min_temp":25, "max_temp":35, "water":"high", "growth_days":105, "avg_yield":25, "market_price":20,
     "image":"https://images.pexels.com/photos/1313267/pexels-photo-1313267.jpeg?auto=compress&cs=tinysrgb&w=800"},
    {"id":"orange", "name":"Orange", "category":"fruits", "seasons":["Winter"], "soils":["Deep Loamy", "Well-drained"], "min_temp":15, "max_temp":30, "water":"medium", "growth_days":1825, "market_price":60,
     "image":"https://images.pexels.com/photos/327098/pexels-photo-327098.jpeg?auto=compress&cs=tinysrgb&w=800"},
    {"id":"lemon", "name":"Lemon", "category":"fruits", "seasons":["Summer", "Winter"], "soils":["Deep Loamy/Alluvial"], "min_temp":21, "max_temp":30, "water":"medium", "growth_days":1277, "market_price":50,
     "image":"https://images.pexels.com/photos/1414110/pexels-photo-1414110.jpeg?auto=compress&cs=tinysrgb&w=800"},
    {"id":"jackfruit", "name":"Jackfruit", "category":"fruits", "seasons":["Summer"], "soils":["Deep Well-drained"], "min_temp":25, "max_temp":35, "water":"medium", "growth_days":2372, "market_price":40,
     "image":"https://healthyfamilyproject.com/wp-content/uploads/2020/05/Jackfruit-background.jpg?auto=compress&cs=tinysrgb&w=800"},
    {"id":"lychee", "name":"Lychee", "category":"fruits", "seasons":["Summer"], "soils":["Well-drained Loamy"], "min_temp":20, "max_temp":33, "water":"high", "growth_days":2007, "market_price":125,
     "image":"https://www.thespruceeats.com/thmb/6Zv_jaeLj557Xfpu4vczVqAw5jc=/1500x0/filters:no_upscale():max_bytes(150000):strip_icc()/GettyImages-583920053-8afcb3f991144493a3a0c67770d9619d.jpg?auto=compress&cs=tinysrgb&w=800"},
    {"id":"fig", "name":"Fig", "category":"fruits", "seasons":["Summer", "Monsoon"], "soils":["Well-drained Sandy/Loamy"], "min_temp":15, "max_temp":21, "water":"low", "growth_days":912, "market_price":175,
     "image":"https://minnetonkaorchards.com/wp-content/uploads/2023/03/fig-tree-seeds-2.jpg?auto=compress&cs=tinysrgb&w=800"},
    {"id":"muskmelon", "name":"Muskmelon", "category":"fruits", "seasons":["Summer"], "soils":["Sandy Loam", "Well-drained"], "min_temp":20, "max_temp":30, "water":"high", "growth_days":90, "market_price":40,
     "image":"https://static.toiimg.com/photo/78075710.cms?auto=compress&cs=tinysrgb&w=800"},
    # vegetables
    {"id":"onion", "name":"Onion", "category":"vegetables", "seasons":["Winter", "Spring"], "soils":["Well-drained Loamy/Sandy"], "min_temp":15, "max_temp":25, "water":"medium", "growth_days":135, "market_price":40,
     "image":"https://images.pexels.com/photos/533342/pexels-photo-533342.jpeg?auto=compress&cs=tinysrgb&w=800"},
    {"id":"tomato", "name":"Tomato", "category":"vegetables", "seasons":["Winter", "Summer"], "soils":["Sandy Loam", "Well-drained"], "min_temp":18, "max_temp":29, "water":"medium", "growth_days":75, "avg_yield":60, "market_price":30,
     "image":"https://images.pexels.com/photos/1327838/pexels-photo-1327838.jpeg?auto=compress&cs=tinysrgb&w=800"},
    {"id":"potato", "name":"Potato", "category":"vegetables", "seasons":["Winter"], "soils":["Sandy Loam", "Loose"], "min_temp":15, "max_temp":25, "water":"medium", "growth_days":105, "market_price":25,
     "image":"https://images.pexels.com/photos/144248/potatoes-vegetables-erdfrucht-bio-144248.jpeg?auto=compress&cs=tinysrgb&w=800"},
    {"id":"carrot", "name":"Carrot", "category":"vegetables", "seasons":["Winter"], "soils":["Sandy Loam", "Deep"], "min_temp":15, "max_temp":20, "water":"medium", "growth_days":75, "market_price":40,
     "image":"https://images.pexels.com/photos/143133/pexels-photo-143133.jpeg?auto=compress&cs=tinysrgb&w=800"},
    {"id":"brinjal", "name":"Brinjal (Eggplant)", "category":"vegetables", "seasons":["Summer", "Monsoon"], "soils":["Loamy", "Well-drained"], "min_temp":21, "max_temp":29, "water":"medium", "growth_days":135, "market_price":30,
     "image":"https://images.pexels.com/photos/321551/pexels-photo-321551.jpeg?auto=compress&cs=tinysrgb&w=800"},
    {"id":"cabbage", "name":"Cabbage", "category":"vegetables", "seasons":["Winter"], "soils":["Sandy Loam", "Fertile"], "min_temp":15, "max_temp":25, "water":"medium", "growth_days":75, "market_price":25,
     "image":"https://images.pexels.com/photos/2518893/pexels-photo-2518893.jpeg?auto=compress&cs=tinysrgb&w=800"},
    {"id":"cauliflower", "name":"Cauliflower", "category":"vegetables", "seasons":["Winter"], "soils":["Sandy Loam", "Well-drained"], "min_temp":15, "max_temp":20, "water":"medium", "growth_days":75, "market_price":40,
     "image":"https://tse3.mm.bing.net/th/id/OIP.ZcL2dB0mrVQzSZzgQ1NBhwHaHa?rs=1&pid=ImgDetMain&o=7&rm=3?auto=compress&cs=tinysrgb&w=800"},
    {"id":"spinach", "name":"Spinach", "category":"vegetables", "seasons":["Winter"], "soils":["Sandy Loam", "Rich Organics"], "min_temp":10, "max_temp":22, "water":"medium", "growth_days":35, "market_price":25,
     "image":"https://images.pexels.com/photos/2325843/pexels-photo-2325843.jpeg?auto=compress&cs=tinysrgb&w=800"},
    {"id":"okra", "name":"Okra (Lady's Finger)", "category":"vegetables", "seasons":["Summer", "Monsoon"], "soils":["Well-drained Loamy"], "min_temp":25, "max_temp":35, "water":"medium", "growth_days":55, "market_price":50,
     "image":"https://tse4.mm.bing.net/th/id/OIP.-NHbaSs-yboVqnYXwTkDggHaE8?rs=1&pid=ImgDetMain&o=7&rm=3?auto=compress&cs=tinysrgb&w=800"},
    {"id":"cucumber", "name":"Cucumber", "category":"vegetables", "seasons":["Summer"], "soils":["Sandy Loam", "Well-drained"], "min_temp":20, "max_temp":30, "water":"high", "growth_days":60, "market_price":25,
     "image":"https://images.pexels.com/photos/2329440/pexels-photo-2329440.jpeg?auto=compress&cs=tinysrgb&w=800"},
    {"id":"bell-pepper", "name":"Bell Pepper (Capsicum)", "category":"vegetables", "seasons":["Winter", "Summer"], "soils":["Well-drained Loamy"], "min_temp":21, "max_temp":25, "water":"medium", "growth_days":70, "market_price":70,
     "image":"https://www.healthbenefitstimes.com/9/gallery/bell-peppers/cache/Bell-peppers.jpg-nggid041295-ngg0dyn-218x146x100-00f0w010c011r110f110r010t010.jpg?auto=compress&cs=tinysrgb&w=800"},
    {"id":"radish", "name":"Radish", "category":"vegetables", "seasons":["Winter"], "soils":["Sandy Loam", "Loose"], "min_temp":10, "max_temp":18, "water":"medium", "growth_days":40, "market_price":25,
     "image":"https://gardenerspath.com/wp-content/uploads/2023/05/How-to-Grow-Radishes-FB.jpg?auto=compress&cs=tinysrgb&w=800"},
    {"id":"beetroot", "name":"Beetroot", "category":"vegetables", "seasons":["Winter"], "soils":["Sandy Loam", "Well-drained"], "min_temp":15, "max_temp":22, "water":"medium", "growth_days":70, "market_price":40,
     "image":"https://th.bing.com/th/id/R.cc6e617b404980aaf862da9334a86f0c?rik=Q71U4mpjD9WrHw&riu=http%3a%2f%2fhealtheatingfood.com%2fwp-content%2fuploads%2f2016%2f03%2fBeetroot-nutritional-composition.jpg&ehk=J9LlpYYpDvyWxlvKfmH6rXzgZeKFXoOHNjDktkmdGHw%3d&risl=&pid=ImgRaw&r=0?auto=compress&cs=tinysrgb&w=800"},
    {"id":"green-beans", "name":"Green Beans", "category":"vegetables", "seasons":["Monsoon", "Winter"], "soils":["Loamy", "Well-drained"], "min_temp":15, "max_temp":25, "water":"medium", "growth_days":55, "market_price":60,
     "image":"https://th.bing.com/th/id/R.c48f9474c3135a33c6005083effd11e7?rik=IZPaE%2f6OsbRT4A&riu=http%3a%2f%2fwww.publicdomainpictures.net%2fpictures%2f80000%2fvelka%2ffresh-greenbeans.jpg&ehk=iostP5pzM1YaMJee2CjIQmQcU9aqtsrNnoLKVcLpQCM%3d&risl=&pid=ImgRaw&r=0?auto=compress&cs=tinysrgb&w=800"},
    {"id":"pumpkin", "name":"Pumpkin", "category":"vegetables", "seasons":["Monsoon", "Winter"], "soils":["Sandy Loam", "Fertile"], "min_temp":18, "max_temp":30, "water":"medium", "growth_days":105, "market_price":25,
     "image":"https://tse4.mm.bing.net/th/id/OIP.-06upNMc0ar7Olw1zr5ojQHaE7?rs=1&pid=ImgDetMain&o=7&rm=3?auto=compress&cs=tinysrgb&w=800"},
    # grains
    {"id":"wheat", "name":"Wheat", "category":"grains", "seasons":["Winter"], "soils":["Loamy/Clayey", "Well-drained"], "min_temp":10, "max_temp":25, "water":"medium", "growth_days":115, "avg_yield":3.2, "market_price":27,
     "image":"https://images.pexels.com/photos/265216/pexels-photo-265216.jpeg?auto=compress&cs=tinysrgb&w=800"},
    {"id":"rice", "name":"Rice", "category":"grains", "seasons":["Monsoon", "Summer"], "soils":["Clayey/Loamy", "Flooded"], "min_temp":20, "max_temp":35, "water":"high", "growth_days":135, "market_price":40,
     "image":"https://english.ahram.org.eg/Media/News/2023/12/5/41_2023-638374065617680784-768.jpg?auto=compress&cs=tinysrgb&w=800"},
    {"id":"corn", "name":"Corn (Maize)", "category":"grains", "seasons":["Summer", "Monsoon"], "soils":["Well-drained Loamy/Sandy"], "min_temp":21, "max_temp":27, "water":"medium", "growth_days":100, "market_price":25,
     "image":"https://images.pexels.com/photos/547263/pexels-photo-547263.jpeg?auto=compress&cs=tinysrgb&w=800"},
    {"id":"barley", "name":"Barley", "category":"grains", "seasons":["Winter"], "soils":["Loamy", "Well-drained"], "min_temp":12, "max_temp":22, "water":"low", "growth_days":110, "market_price":30,
     "image":"https://cdn-prod.medicalnewstoday.com/content/images/articles/295/295268/barley-grains-in-a-wooden-bowl.jpg?auto=compress&cs=tinysrgb&w=800"},
    # pulses
    {"id":"chickpea", "name":"Chickpea (Chana)", "category":"pulses", "seasons":["Winter"], "soils":["Black Loamy", "Well-drained"], "min_temp":15, "max_temp":30, "water":"low", "growth_days":92, "market_price":80,
     "image":"https://www.momjunction.com/wp-content/uploads/2014/08/8-Health-Benefits-of-Chickpeas-Chana-During-Pregnancy.jpg?auto=compress&cs=tinysrgb&w=800"},
    {"id":"lentil", "name":"Lentil (Masoor)", "category":"pulses", "seasons":["Winter"], "soils":["Loamy/Sandy", "Well-drained"], "min_temp":18, "max_temp":30, "water":"low", "growth_days":120, "market_price":90,
     "image":"https://onelifetoeat.files.wordpress.com/2010/04/brown-lentil-masoor-dal.jpg?auto=compress&cs=tinysrgb&w=800"},
    {"id":"black-gram", "name":"Black Gram (Urad)", "category":"pulses", "seasons":["Summer", "Winter"], "soils":["Black/Red Loamy"], "min_temp":25, "max_temp":35, "water":"medium", "growth_days":70, "market_price":100,
     "image":"https://img.freepik.com/free-photo/urad-dal-black-gram-vigna-mungo-wooden-bowl-white-surface_136354-1704.jpg?size=626&ext=jpg?auto=compress&cs=tinysrgb&w=800"},
    {"id":"green-gram", "name":"Green Gram (Moong)", "category":"pulses", "seasons":["Summer", "Monsoon"], "soils":["Sandy Loam", "Well-drained"], "min_temp":20, "max_temp":40, "water":"low", "growth_days":65, "market_price":80,
     "image":"https://www.naatigrains.com/image/cache/catalog/naatigrains-products/NG195/green-gram-paasi-payiru-masala-multi-vitamins-nuts-seeds-order-now-bangalore-naati-grains-1000x1000.jpg?auto=compress&cs=tinysrgb&w=800"},
]

SEASONS = ["Summer", "Monsoon", "Winter", "Spring"]

CATEGORIES = ["fruits", "vegetables", "grains", "pulses"]

WATER_REQUIREMENTS = ["low", "medium", "high"]

# options offered for a farm's soil
SOIL_TYPES = [
    "Alluvial", "Black Soil", "Red Soil", "Laterite", "Desert Soil",
    "Mountain Soil", "Loamy", "Sandy Loam", "Clay Loam", "Clay",
    "Red Lateritic", "Well-drained Loamy", "Rich Loamy", "Light Well-drained Sandy/Loamy",
    "Sandy Loam Rich in Organics", "Deep Loamy/Alluvial", "Deep Well-drained",
    "Well-drained Sandy/Loamy", "Well-drained Loamy/Sandy", "Black Loamy",
    "Black/Red Loamy", "Well-drained Uniform Texture", "Wide range Loamy to Sandy",
]

INDIAN_STATES = [
    "Andhra Pradesh", "Arunachal Pradesh", "Assam", "Bihar", "Chhattisgarh",
    "Goa", "Gujarat", "Haryana", "Himachal Pradesh", "Jharkhand", "Karnataka",
    "Kerala", "Madhya Pradesh", "Maharashtra", "Manipur", "Meghalaya", "Mizoram",
    "Nagaland", "Odisha", "Punjab", "Rajasthan", "Sikkim", "Tamil Nadu",
    "Telangana", "Tripura", "Uttar Pradesh", "Uttarakhand", "West Bengal",
]
