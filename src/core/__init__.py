"""
Couche domaine (core).

Contient les entités métier, ports (interfaces abstraites), objets valeur
et la primitive d'égalité structurelle.
Cette couche n'a AUCUNE dépendance vers l'infrastructure.

Sous-packages :
- entities/ : Entités métier (Category)
- ports/ : Interfaces abstraites définissant les contrats pour les adaptateurs
- value_objects/ : Objets valeur (ValueObject, Uuid)
- validators/ : Validation des invariants d'entités
"""
