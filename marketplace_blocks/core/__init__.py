"""Noyau : arbres de blocs, schémas, chaînes i18n."""
