"""
Brand Store

Persists extracted brand profiles to the Supabase `brands` table.
"""

import logging
from typing import Dict, List, Optional

from supabase import create_client, Client

from core.brand_extractor import BrandProfile
from core.config import Config
from core.exceptions import ConfigurationError, StorageError

logger = logging.getLogger(__name__)


class BrandStore:
    """Read and write brand rows in Supabase"""

    def __init__(self, supabase_url: Optional[str], supabase_key: Optional[str],
                 client: Optional[Client] = None):
        """
        Args:
            supabase_url: Supabase project URL
            supabase_key: Service role key
            client: Optional preconfigured Supabase client

        Raises:
            ConfigurationError: If the URL or key is missing
        """
        if not supabase_url or not supabase_key:
            raise ConfigurationError("SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY must be set")

        self.supabase: Client = client or create_client(supabase_url, supabase_key)
        self.table = Config.BRANDS_TABLE

    @staticmethod
    def to_row(profile: BrandProfile, website_url: str) -> Dict:
        """Map a profile onto the brands table columns"""
        return {
            'name': profile.name or 'Unknown Brand',
            'website_url': website_url,
            'primary_color': profile.primary_color,
            'secondary_color': profile.secondary_color,
            'logo_url': profile.logo_url or None,
            'tone': profile.tone.value,
            'keywords': profile.keywords,
        }

    def save(self, profile: BrandProfile, website_url: str) -> Dict:
        """
        Insert a brand row

        Returns:
            The inserted row as returned by Supabase

        Raises:
            StorageError: If the insert fails or returns nothing
        """
        row = self.to_row(profile, website_url)
        try:
            result = self.supabase.table(self.table).insert(row).execute()
        except Exception as e:
            logger.error(f"❌ Error saving brand for {website_url}: {e}")
            raise StorageError(f"Failed to save brand: {e}") from e

        if not result.data:
            raise StorageError("Failed to save brand: no row returned")

        logger.info(f"✅ Saved brand '{row['name']}' ({website_url})")
        return result.data[0]

    def list_brands(self, limit: int = 100) -> List[Dict]:
        """Most recently created brands first"""
        try:
            result = self.supabase.table(self.table)\
                .select('*')\
                .order('created_at', desc=True)\
                .limit(limit)\
                .execute()
        except Exception as e:
            logger.error(f"❌ Error listing brands: {e}")
            raise StorageError(f"Failed to list brands: {e}") from e

        return result.data or []
