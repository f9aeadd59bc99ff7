"""Static inventory used by the offline travel search."""
from __future__ import annotations

from typing import Tuple

from src.services.travel_search.schemas import Activity, Flight, Hotel

MOCK_FLIGHTS: Tuple[Flight, ...] = (
    # New York to Paris
    Flight(id="AF1001", airline="Air France", flight_number="AF 1001", origin="JFK", destination="CDG",
           departure_time="22:30", arrival_time="12:15+1", duration="7h 45m", price=1245,
           stops=0, aircraft="Boeing 777-300ER"),
    Flight(id="DL264", airline="Delta Air Lines", flight_number="DL 264", origin="JFK", destination="CDG",
           departure_time="23:55", arrival_time="13:40+1", duration="7h 45m", price=1189,
           stops=0, aircraft="Airbus A330-300"),
    Flight(id="BA178", airline="British Airways", flight_number="BA 178", origin="JFK", destination="CDG",
           departure_time="09:50", arrival_time="23:30", duration="10h 40m", price=987,
           stops=1, aircraft="Boeing 787-9"),
    # New York to Rome
    Flight(id="AZ608", airline="ITA Airways", flight_number="AZ 608", origin="JFK", destination="FCO",
           departure_time="21:40", arrival_time="13:55+1", duration="8h 15m", price=1356,
           stops=0, aircraft="Airbus A330-200"),
    Flight(id="DL216", airline="Delta Air Lines", flight_number="DL 216", origin="JFK", destination="FCO",
           departure_time="22:25", arrival_time="14:40+1", duration="8h 15m", price=1278,
           stops=0, aircraft="Airbus A330-900neo"),
    # Los Angeles to Tokyo
    Flight(id="NH175", airline="ANA", flight_number="NH 175", origin="LAX", destination="NRT",
           departure_time="11:50", arrival_time="16:35+1", duration="11h 45m", price=1456,
           stops=0, aircraft="Boeing 777-300ER"),
    Flight(id="JL62", airline="JAL", flight_number="JL 62", origin="LAX", destination="NRT",
           departure_time="13:05", arrival_time="17:50+1", duration="11h 45m", price=1398,
           stops=0, aircraft="Boeing 787-9"),
)

MOCK_HOTELS: Tuple[Hotel, ...] = (
    Hotel(id="paris-ritz", name="The Ritz Paris", city="Paris",
          location="Place Vendôme, 1st Arrondissement", rating=5, price_per_night=1200,
          amenities=["Spa", "Fitness Center", "Restaurant", "Bar", "Concierge", "Room Service"],
          description="Legendary luxury hotel in the heart of Paris with opulent rooms and world-class service.",
          category="luxury", review_count=2847, review_score=9.2),
    Hotel(id="paris-bristol", name="Le Bristol Paris", city="Paris",
          location="Faubourg Saint-Honoré, 8th Arrondissement", rating=5, price_per_night=980,
          amenities=["Spa", "Pool", "Restaurant", "Bar", "Garden", "Pet-Friendly"],
          description="Palace hotel with exceptional French elegance and Michelin-starred dining.",
          category="luxury", review_count=1923, review_score=9.1),
    Hotel(id="paris-marais", name="Hotel des Grands Boulevards", city="Paris",
          location="Le Marais, 4th Arrondissement", rating=4, price_per_night=285,
          amenities=["Restaurant", "Bar", "Free WiFi", "Concierge"],
          description="Boutique hotel in historic Marais district with modern amenities and classic charm.",
          category="mid-range", review_count=1456, review_score=8.7),
    Hotel(id="paris-budget", name="Hotel Jeanne d'Arc", city="Paris",
          location="Le Marais, 4th Arrondissement", rating=3, price_per_night=145,
          amenities=["Free WiFi", "Breakfast", "24/7 Reception"],
          description="Charming budget hotel in the heart of historic Paris with comfortable rooms.",
          category="budget", review_count=987, review_score=8.1),
    Hotel(id="rome-hassler", name="Hotel Hassler Roma", city="Rome",
          location="Spanish Steps, Historic Center", rating=5, price_per_night=850,
          amenities=["Spa", "Restaurant", "Bar", "Rooftop Terrace", "Concierge"],
          description="Iconic luxury hotel overlooking the Spanish Steps with breathtaking city views.",
          category="luxury", review_count=2341, review_score=9.0),
    Hotel(id="rome-artemide", name="Hotel Artemide", city="Rome",
          location="Near Termini Station, Historic Center", rating=4, price_per_night=220,
          amenities=["Rooftop Restaurant", "Spa", "Fitness Center", "Free WiFi"],
          description="Modern 4-star hotel near major attractions with rooftop dining and city views.",
          category="mid-range", review_count=1678, review_score=8.5),
    Hotel(id="rome-budget", name="The RomeHello", city="Rome",
          location="Termini Station Area", rating=3, price_per_night=89,
          amenities=["Free WiFi", "Breakfast", "Luggage Storage"],
          description="Modern budget hotel with great location near transportation and major sites.",
          category="budget", review_count=1234, review_score=7.9),
    Hotel(id="tokyo-mandarin", name="Mandarin Oriental Tokyo", city="Tokyo",
          location="Nihonbashi, Central Tokyo", rating=5, price_per_night=720,
          amenities=["Spa", "Multiple Restaurants", "Bar", "Fitness Center", "City Views"],
          description="Ultra-luxury hotel with stunning Tokyo skyline views and world-class amenities.",
          category="luxury", review_count=1876, review_score=9.3),
    Hotel(id="tokyo-shibuya", name="Shibuya Excel Hotel Tokyu", city="Tokyo",
          location="Shibuya, Central Tokyo", rating=4, price_per_night=180,
          amenities=["Restaurant", "Free WiFi", "City Views", "Shopping Access"],
          description="Modern hotel in the heart of Shibuya with direct access to shopping and nightlife.",
          category="mid-range", review_count=2156, review_score=8.4),
)

MOCK_ACTIVITIES: Tuple[Activity, ...] = (
    Activity(id="eiffel-tower", name="Eiffel Tower Skip-the-Line Tour", type="attraction", city="Paris",
             location="Champ de Mars, 7th Arrondissement", price=89, duration="2 hours", rating=4.7,
             description="Skip the lines and ascend to the second floor of Paris's most iconic landmark.",
             tags=["iconic", "views", "photography", "must-see"],
             operating_hours="9:30 AM - 11:45 PM", booking_required=True),
    Activity(id="louvre-tour", name="Louvre Museum Guided Tour", type="attraction", city="Paris",
             location="1st Arrondissement", price=65, duration="3 hours", rating=4.6,
             description="Expert-guided tour of the world's largest art museum including the Mona Lisa.",
             tags=["art", "culture", "history", "guided"],
             operating_hours="9:00 AM - 6:00 PM", booking_required=True),
    Activity(id="seine-cruise", name="Seine River Evening Cruise with Dinner", type="tour", city="Paris",
             location="Seine River", price=125, duration="2.5 hours", rating=4.5,
             description="Romantic dinner cruise along the Seine with views of illuminated landmarks.",
             tags=["romantic", "dinner", "views", "evening"],
             operating_hours="7:30 PM - 10:00 PM", booking_required=True),
    Activity(id="montmartre-walk", name="Montmartre Walking Tour", type="tour", city="Paris",
             location="Montmartre, 18th Arrondissement", price=35, duration="2 hours", rating=4.4,
             description="Explore the artistic quarter of Montmartre with Sacré-Cœur and local cafés.",
             tags=["walking", "art", "history", "neighborhood"],
             operating_hours="10:00 AM - 6:00 PM"),
    Activity(id="le-comptoir", name="Le Comptoir du Relais", type="restaurant", city="Paris",
             location="Saint-Germain, 6th Arrondissement", price=75, duration="2 hours", rating=4.3,
             description="Authentic French bistro experience with traditional dishes and wine pairing.",
             tags=["french cuisine", "bistro", "wine", "authentic"],
             operating_hours="12:00 PM - 2:00 PM, 7:00 PM - 11:00 PM", booking_required=True),
    Activity(id="colosseum-tour", name="Colosseum Underground Tour", type="attraction", city="Rome",
             location="Historic Center", price=95, duration="3 hours", rating=4.8,
             description="Exclusive access to the underground chambers and arena floor of the Colosseum.",
             tags=["history", "ancient", "underground", "exclusive"],
             operating_hours="8:30 AM - 7:00 PM", booking_required=True),
    Activity(id="vatican-tour", name="Vatican Museums & Sistine Chapel Tour", type="attraction", city="Rome",
             location="Vatican City", price=78, duration="4 hours", rating=4.7,
             description="Comprehensive tour of Vatican Museums, Sistine Chapel, and St. Peter's Basilica.",
             tags=["art", "religion", "history", "michelangelo"],
             operating_hours="8:00 AM - 6:00 PM", booking_required=True),
    Activity(id="trastevere-food", name="Trastevere Food Walking Tour", type="tour", city="Rome",
             location="Trastevere", price=89, duration="3.5 hours", rating=4.6,
             description="Taste authentic Roman cuisine while exploring the charming Trastevere neighborhood.",
             tags=["food", "walking", "local", "authentic"],
             operating_hours="6:00 PM - 9:30 PM", booking_required=True),
    Activity(id="roman-forum", name="Roman Forum and Palatine Hill", type="attraction", city="Rome",
             location="Historic Center", price=45, duration="2.5 hours", rating=4.4,
             description="Explore the ruins of ancient Rome with skip-the-line access.",
             tags=["ancient", "ruins", "history", "archaeology"],
             operating_hours="8:30 AM - 7:00 PM"),
    Activity(id="da-enzo", name="Da Enzo al 29", type="restaurant", city="Rome",
             location="Trastevere", price=55, duration="1.5 hours", rating=4.5,
             description="Family-run trattoria serving traditional Roman dishes in an intimate setting.",
             tags=["roman cuisine", "family-run", "traditional", "intimate"],
             operating_hours="12:30 PM - 3:00 PM, 7:30 PM - 11:00 PM", booking_required=True),
    Activity(id="tsukiji-tour", name="Tsukiji Outer Market Food Tour", type="tour", city="Tokyo",
             location="Tsukiji", price=98, duration="3 hours", rating=4.8,
             description="Early morning tour of the famous fish market with fresh sushi breakfast.",
             tags=["food", "market", "sushi", "early morning"],
             operating_hours="5:00 AM - 8:00 AM", booking_required=True),
    Activity(id="senso-ji", name="Senso-ji Temple and Asakusa District", type="attraction", city="Tokyo",
             location="Asakusa", price=0, duration="2 hours", rating=4.5,
             description="Visit Tokyo's oldest temple and explore traditional shopping streets.",
             tags=["temple", "traditional", "free", "culture"],
             operating_hours="6:00 AM - 5:00 PM"),
    Activity(id="shibuya-crossing", name="Shibuya Sky Observation Deck", type="attraction", city="Tokyo",
             location="Shibuya", price=28, duration="1 hour", rating=4.6,
             description="Panoramic views of Tokyo from the famous Shibuya crossing area.",
             tags=["views", "modern", "cityscape", "photography"],
             operating_hours="9:00 AM - 11:00 PM"),
    Activity(id="jiro-sushi", name="Sukiyabashi Jiro Experience", type="restaurant", city="Tokyo",
             location="Ginza", price=450, duration="30 minutes", rating=4.9,
             description="World-renowned sushi experience at the legendary three-Michelin-starred restaurant.",
             tags=["sushi", "michelin", "legendary", "expensive"],
             operating_hours="11:30 AM - 2:00 PM, 5:00 PM - 8:30 PM", booking_required=True),
)

# country names resolve to the single mock city we stock for them
COUNTRY_CITIES = {
    "france": "paris",
    "italy": "rome",
    "japan": "tokyo",
}
