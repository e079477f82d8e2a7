"""
Config Commons
===================================================

Warstwa typowanych wartości konfiguracyjnych: konwersja surowych wartości
(tekst z plików właściwości, `.env`, INI, zmiennych środowiskowych lub obiekty
już otypowane) na typy docelowe oraz zapis wartości otypowanych w kanonicznej
postaci tekstowej.

## Moduły

#### config - Typowane Wartości Konfiguracji
- `convert_value` / `render`: konwersja w obie strony z gwarancją round-trip
- `split_escaped` / `escape_with_single_quote`: format list i map z cytowaniem apostrofem
- `Configuration`: magazyn surowych wartości z leniwą konwersją przy odczycie
- `create_configuration`, `load_dotenv_configuration`, `load_ini_configuration`: import źródeł

#### plugin - Wyszukiwanie Pluginów
- `DirectoryBasedPluginFinder`: deskryptory pluginów z podkatalogów

#### record - Wysyłka Danych
- `BufferSend`: zapis zserializowanego bufora do kanału wyjściowego

#### util - Narzędzia Pomocnicze
- `logger`: funkcje logowania i `MessageLogger` zapisujący do pliku

"""
