from datetime import date, timedelta
from unittest import mock

from django.core.exceptions import ValidationError
from django.test import TestCase

from taches import store
from taches.models import Tache


class TacheModelTest(TestCase):
    def test_str_returns_title(self):
        """La méthode __str__ doit contenir le titre de la tâche."""
        titre = "Tester la méthode __str__"
        t = Tache.objects.create(title=titre)
        self.assertIn(titre, str(t))
        self.assertIn("en cours", str(t))

    def test_ordering_is_insertion_order(self):
        premiere = Tache.objects.create(title="B")
        seconde = Tache.objects.create(title="A")
        self.assertEqual(list(Tache.objects.all()), [premiere, seconde])


class CreerTest(TestCase):
    def test_creates_active_task_with_timestamps(self):
        tache = store.creer("Acheter du lait", due_date=date(2026, 10, 19))

        self.assertIsNotNone(tache.pk)
        self.assertFalse(tache.is_completed)
        self.assertEqual(tache.due_date, date(2026, 10, 19))
        self.assertIsNotNone(tache.created_at)
        self.assertIsNotNone(tache.updated_at)

    def test_empty_title_is_rejected_without_writing(self):
        for titre in ("", "   "):
            with self.subTest(titre=titre):
                with self.assertRaises(ValidationError):
                    store.creer(titre)
        self.assertEqual(Tache.objects.count(), 0)

    def test_created_task_is_listed_exactly_once(self):
        tache = store.creer("Une fois")
        ids = [t.pk for t in store.lister()]
        self.assertEqual(ids.count(tache.pk), 1)


class ListerTest(TestCase):
    def test_listing_is_stable_without_mutation(self):
        for titre in ("c", "a", "b"):
            store.creer(titre)
        self.assertEqual(
            [t.pk for t in store.lister()],
            [t.pk for t in store.lister()],
        )
        self.assertEqual([t.title for t in store.lister()], ["c", "a", "b"])


class MettreAJourTest(TestCase):
    def setUp(self):
        self.tache = store.creer("Titre initial")

    def test_toggle_twice_keeps_title(self):
        store.mettre_a_jour(self.tache.pk, is_completed=True)
        tache = store.mettre_a_jour(self.tache.pk, is_completed=False)

        tache.refresh_from_db()
        self.assertFalse(tache.is_completed)
        self.assertEqual(tache.title, "Titre initial")

    def test_updates_title_and_refreshes_updated_at(self):
        plus_tard = self.tache.updated_at + timedelta(minutes=5)
        with mock.patch("taches.store.timezone.now", return_value=plus_tard):
            tache = store.mettre_a_jour(self.tache.pk, title="Nouveau titre")

        tache.refresh_from_db()
        self.assertEqual(tache.title, "Nouveau titre")
        self.assertEqual(tache.updated_at, plus_tard)
        self.assertGreater(tache.updated_at, self.tache.updated_at)
        self.assertEqual(tache.created_at, self.tache.created_at)

    def test_every_update_refreshes_updated_at(self):
        premier = self.tache.updated_at + timedelta(minutes=1)
        second = premier + timedelta(minutes=1)
        with mock.patch("taches.store.timezone.now", return_value=premier):
            store.mettre_a_jour(self.tache.pk, is_completed=True)
        with mock.patch("taches.store.timezone.now", return_value=second):
            store.mettre_a_jour(self.tache.pk)

        self.tache.refresh_from_db()
        self.assertEqual(self.tache.updated_at, second)

    def test_task_deleted_during_update_raises_not_found(self):
        perimee = store.obtenir(self.tache.pk)
        Tache.objects.filter(pk=self.tache.pk).delete()

        with mock.patch("taches.store.obtenir", return_value=perimee):
            with self.assertRaises(store.TacheIntrouvable):
                store.mettre_a_jour(self.tache.pk, title="Trop tard")
        self.assertFalse(Tache.objects.exists())

    def test_empty_title_is_rejected_and_not_saved(self):
        with self.assertRaises(ValidationError):
            store.mettre_a_jour(self.tache.pk, title="")

        self.tache.refresh_from_db()
        self.assertEqual(self.tache.title, "Titre initial")

    def test_unknown_id_raises_not_found(self):
        with self.assertRaises(store.TacheIntrouvable):
            store.mettre_a_jour(self.tache.pk + 100, is_completed=True)

    def test_not_found_is_a_does_not_exist(self):
        with self.assertRaises(Tache.DoesNotExist):
            store.obtenir(self.tache.pk + 100)

    def test_due_date_is_not_updatable(self):
        with self.assertRaises(TypeError):
            store.mettre_a_jour(self.tache.pk, due_date=date(2030, 1, 1))


class SupprimerTest(TestCase):
    def test_delete_is_permanent(self):
        tache = store.creer("Éphémère")
        store.supprimer(tache.pk)

        self.assertFalse(Tache.objects.filter(pk=tache.pk).exists())
        with self.assertRaises(store.TacheIntrouvable):
            store.supprimer(tache.pk)
        with self.assertRaises(store.TacheIntrouvable):
            store.mettre_a_jour(tache.pk, title="Résurrection")
