# Approximate development indicators (demo data), one row per country and year.
WORLD_INDICATORS = [
    {"Country": "United States", "Year": 2010, "Population": 309327143, "GDPPerCapita": 48650.6, "LifeExpectancy": 78.5, "InternetUsers": 71.7},
    {"Country": "United States", "Year": 2015, "Population": 320738994, "GDPPerCapita": 56762.7, "LifeExpectancy": 78.7, "InternetUsers": 74.6},
    {"Country": "United States", "Year": 2020, "Population": 331511512, "GDPPerCapita": 63528.6, "LifeExpectancy": 77.0, "InternetUsers": 90.9},
    {"Country": "China", "Year": 2010, "Population": 1337705000, "GDPPerCapita": 4550.5, "LifeExpectancy": 75.2, "InternetUsers": 34.3},
    {"Country": "China", "Year": 2015, "Population": 1379860000, "GDPPerCapita": 8016.4, "LifeExpectancy": 76.1, "InternetUsers": 50.3},
    {"Country": "China", "Year": 2020, "Population": 1411100000, "GDPPerCapita": 10408.7, "LifeExpectancy": 77.1, "InternetUsers": 70.4},
    {"Country": "India", "Year": 2010, "Population": 1240613620, "GDPPerCapita": 1350.6, "LifeExpectancy": 66.7, "InternetUsers": 7.5},
    {"Country": "India", "Year": 2015, "Population": 1322866505, "GDPPerCapita": 1590.2, "LifeExpectancy": 68.6, "InternetUsers": 14.9},
    {"Country": "India", "Year": 2020, "Population": 1396387127, "GDPPerCapita": 1913.2, "LifeExpectancy": 70.2, "InternetUsers": 43.0},
    {"Country": "Germany", "Year": 2010, "Population": 81776930, "GDPPerCapita": 41572.5, "LifeExpectancy": 80.0, "InternetUsers": 82.0},
    {"Country": "Germany", "Year": 2015, "Population": 81686611, "GDPPerCapita": 41103.3, "LifeExpectancy": 80.6, "InternetUsers": 87.6},
    {"Country": "Germany", "Year": 2020, "Population": 83160871, "GDPPerCapita": 46772.8, "LifeExpectancy": 81.0, "InternetUsers": 89.8},
    {"Country": "Brazil", "Year": 2010, "Population": 196353492, "GDPPerCapita": 11286.2, "LifeExpectancy": 73.6, "InternetUsers": 40.7},
    {"Country": "Brazil", "Year": 2015, "Population": 204471759, "GDPPerCapita": 8814.0, "LifeExpectancy": 75.0, "InternetUsers": 58.3},
    {"Country": "Brazil", "Year": 2020, "Population": 213196304, "GDPPerCapita": 6923.2, "LifeExpectancy": 74.0, "InternetUsers": 81.3},
    {"Country": "Nigeria", "Year": 2010, "Population": 158503197, "GDPPerCapita": 2280.4, "LifeExpectancy": 50.9, "InternetUsers": 11.5},
    {"Country": "Nigeria", "Year": 2015, "Population": 183995785, "GDPPerCapita": 2687.5, "LifeExpectancy": 52.1, "InternetUsers": 24.5},
    {"Country": "Nigeria", "Year": 2020, "Population": 208327405, "GDPPerCapita": 2097.1, "LifeExpectancy": 52.9, "InternetUsers": 35.5},
]
